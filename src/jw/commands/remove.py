"""Implementation for the ``jw rm`` command."""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import fs, jj, log, paths, workspace
from ..errors import CannotRemoveDefaultWorkspaceError


def remove_workspace(
    name: str,
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Forget a workspace in jj and delete its directory.

    A failing ``jj workspace forget`` is only reported: the workspace may
    already be forgotten, and the directory is removed either way.

    Raises:
        CannotRemoveDefaultWorkspaceError: For the default workspace, before
            anything is touched.

    Example:
        $ jw rm feature
    """
    if paths.normalize_workspace_name(name) == paths.DEFAULT_WORKSPACE_NAME:
        raise CannotRemoveDefaultWorkspaceError()

    cwd = workspace.resolve_cwd(cwd)
    target = workspace.resolve_workspace(name, cwd=cwd)

    log.info(f'Removing workspace "{target.name}"...')
    result = jj.workspace_forget(target.name, cwd=cwd, runner=runner)
    if not result.ok:
        log.warning(f"Failed to run jj workspace forget: {result.stderr.strip()}")

    if target.path.exists():
        fs.remove_tree(target.path)

    log.success(f'Removed workspace "{target.name}"')
