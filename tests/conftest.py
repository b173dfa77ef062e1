# ruff: noqa: E402

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

import jw.log as jw_log


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JW_LOG_LEVEL", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr(jw_log, "_configured_level", None)
    monkeypatch.setattr(jw_log, "_no_color_override", None)
