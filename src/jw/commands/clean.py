"""Implementation for the ``jw clean`` command."""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import jj, log, paths, workspace


def clean_workspaces(
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> list[str]:
    """Forget every workspace whose directory no longer exists.

    Forget failures are reported per workspace and do not stop the sweep.

    Returns:
        Names of the workspaces that were forgotten.

    Example:
        $ jw clean
        Forgotten workspaces:
          old-feature
    """
    cwd = workspace.resolve_cwd(cwd)
    forgotten: list[str] = []
    for name in jj.list_workspace_names(cwd=cwd, runner=runner):
        if name == paths.DEFAULT_WORKSPACE_NAME:
            continue
        if workspace.resolve_workspace(name, cwd=cwd).path.exists():
            continue
        result = jj.workspace_forget(name, cwd=cwd, runner=runner)
        if result.ok:
            forgotten.append(name)
        else:
            log.warning(f'Failed to forget workspace "{name}": {result.stderr.strip()}')

    if not forgotten:
        log.info("No stale workspaces found")
        return forgotten

    log.success("Forgotten workspaces:")
    for name in forgotten:
        log.info(f"  {name}")
    return forgotten
