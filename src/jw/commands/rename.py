"""Implementation for the ``jw rename`` command."""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import fs, jj, log, paths, workspace
from ..errors import (
    CannotRenameDefaultWorkspaceError,
    JujutsuCommandError,
    WorkspaceExistsError,
    WorkspaceNotFoundError,
)


def rename_workspace(
    old_name: str,
    new_name: str,
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> Path:
    """Rename a workspace in jj, then move its directory.

    ``jj workspace rename`` renames the workspace checked out in its working
    directory, so it runs inside the old workspace before the move.

    Returns:
        New workspace path.

    Example:
        $ jw rename feature feature-v2
    """
    for value in (old_name, new_name):
        if paths.normalize_workspace_name(value) == paths.DEFAULT_WORKSPACE_NAME:
            raise CannotRenameDefaultWorkspaceError()

    cwd = workspace.resolve_cwd(cwd)
    old = workspace.resolve_workspace(old_name, cwd=cwd)
    new = workspace.resolve_workspace(new_name, cwd=cwd)

    if not old.path.exists():
        raise WorkspaceNotFoundError(old.name)
    if new.path.exists():
        raise WorkspaceExistsError(new.name)

    log.info(f'Renaming workspace "{old.name}" to "{new.name}"...')
    result = jj.workspace_rename(new.name, cwd=old.path, runner=runner)
    if not result.ok:
        raise JujutsuCommandError("rename workspace", result.stderr)

    fs.move_tree(old.path, new.path)

    log.success(f'Renamed workspace "{old.name}" to "{new.name}"')
    return new.path
