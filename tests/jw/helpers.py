# ruff: noqa: E402

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import jw.paths as paths
from jw.exec import CommandRequest, CommandResult, SubprocessCommandRunner


def make_repo(root: Path, name: str = "repo") -> Path:
    """Create a default workspace (``.jj/repo`` directory) under ``root``."""
    repo = root / name
    (repo / paths.JJ_DIRNAME / paths.REPO_MARKER_NAME / "store").mkdir(parents=True)
    return repo


def make_linked_workspace(default_root: Path, path: Path) -> Path:
    """Create a secondary workspace whose ``.jj/repo`` file points at ``default_root``."""
    (path / paths.JJ_DIRNAME).mkdir(parents=True)
    paths.repo_marker_path(path).write_text(
        f"{paths.repo_marker_path(default_root)}\n", encoding="utf-8"
    )
    return path


def write_config(default_root: Path, payload: dict) -> Path:
    path = default_root / paths.CONFIG_FILENAME
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class FakeJj:
    """Command runner that emulates the ``jj workspace`` subcommands on disk.

    Non-``jj`` programs succeed unless listed in ``command_results``; with
    ``real_commands`` they run as real subprocesses instead.
    """

    def __init__(self, default_root: Path, *, real_commands: bool = False) -> None:
        self.real_commands = real_commands
        self.default_root = default_root
        self.workspaces: dict[str, Path] = {"default": default_root}
        self.change_ids: dict[str, str] = {"default": "aaa111"}
        self.failures: dict[tuple[str, ...], str] = {}
        self.command_results: dict[str, tuple[int, str]] = {}
        self.requests: list[CommandRequest] = []
        self.edits: list[tuple[str, Path | None]] = []

    def register(self, name: str, path: Path, change_id: str = "bbb222") -> None:
        self.workspaces[name] = path
        self.change_ids[name] = change_id

    def fail(self, *subcommand: str, stderr: str = "boom") -> None:
        self.failures[subcommand] = stderr

    @property
    def jj_calls(self) -> list[list[str]]:
        return [list(request.argv[1:]) for request in self.requests if request.argv[0] == "jj"]

    def listing(self) -> str:
        return "".join(
            f"{name}: {self.change_ids[name]} c0ffee00 (no description set)\n"
            for name in self.workspaces
        )

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        argv = request.argv
        if argv[0] != "jj" and self.real_commands:
            return SubprocessCommandRunner().run(request)
        if argv[0] != "jj":
            code, stderr = self.command_results.get(argv[0], (0, ""))
            return CommandResult(argv=argv, returncode=code, stdout="", stderr=stderr)

        subcommand = tuple(argv[1:3]) if argv[1] == "workspace" else (argv[1],)
        if subcommand in self.failures:
            return self._result(argv, 1, stderr=self.failures[subcommand])

        if subcommand == ("workspace", "list"):
            return self._result(argv, 0, stdout=self.listing())
        if subcommand == ("workspace", "add"):
            name = argv[argv.index("--name") + 1]
            revision = argv[argv.index("--revision") + 1] if "--revision" in argv else None
            target = Path(argv[-1])
            make_linked_workspace(self.default_root, target)
            self.register(name, target, revision or f"new{len(self.workspaces)}")
            return self._result(argv, 0)
        if subcommand == ("workspace", "forget"):
            name = argv[3]
            if name not in self.workspaces:
                return self._result(argv, 1, stderr=f"Error: No such workspace: {name}")
            del self.workspaces[name]
            del self.change_ids[name]
            return self._result(argv, 0)
        if subcommand == ("workspace", "rename"):
            new_name = argv[3]
            for name, path in list(self.workspaces.items()):
                if path == request.cwd:
                    self.workspaces[new_name] = self.workspaces.pop(name)
                    self.change_ids[new_name] = self.change_ids.pop(name)
                    return self._result(argv, 0)
            return self._result(argv, 1, stderr="Error: not in a workspace")
        if subcommand == ("edit",):
            self.edits.append((argv[2], request.cwd))
            return self._result(argv, 0)
        return self._result(argv, 1, stderr=f"unknown command: {' '.join(argv)}")

    @staticmethod
    def _result(
        argv: tuple[str, ...], code: int, *, stdout: str = "", stderr: str = ""
    ) -> CommandResult:
        return CommandResult(argv=argv, returncode=code, stdout=stdout, stderr=stderr)
