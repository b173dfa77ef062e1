"""Implementation for the ``jw list`` command."""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import jj, paths, workspace
from ..io import say


def list_workspaces(
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> list[workspace.WorkspaceStatus]:
    """Print the default workspace followed by every other known workspace.

    The workspace containing ``cwd`` is marked with ``*``; workspaces jj
    knows about but whose directory is gone are marked with ``✗``.

    Returns:
        Status records for the non-default workspaces, in listing order.

    Example:
        $ jw list
        * default (/src/repo)
          feature (/src/repo-workspaces/feature)
          stale ✗
    """
    cwd = workspace.resolve_cwd(cwd)
    names = jj.list_workspace_names(cwd=cwd, runner=runner)
    default_root = paths.resolve_default_root(cwd)
    current_root = paths.find_repo_root(cwd)

    say(workspace.format_default_workspace_line(default_root, current_root))

    statuses: list[workspace.WorkspaceStatus] = []
    for name in names:
        if name == paths.DEFAULT_WORKSPACE_NAME:
            continue
        # Resolved per name so each line honours the current config.
        path = workspace.resolve_workspace(name, cwd=cwd).path
        exists = path.exists()
        say(workspace.format_workspace_line(name, path, current_root, exists))
        statuses.append(
            workspace.WorkspaceStatus(
                name=name, path=path, exists=exists, current=path == current_root
            )
        )
    return statuses
