"""Implementation for the ``jw go`` command."""

from __future__ import annotations

from pathlib import Path

from .. import paths, workspace
from ..errors import WorkspaceNotFoundError
from ..io import say


def go_workspace(
    name: str = paths.DEFAULT_WORKSPACE_NAME, *, cwd: Path | None = None
) -> Path:
    """Print the path of a workspace so a shell wrapper can ``cd`` into it.

    Example:
        $ cd "$(jw go feature)"
    """
    cwd = workspace.resolve_cwd(cwd)
    if name == paths.DEFAULT_WORKSPACE_NAME:
        default_root = paths.resolve_default_root(cwd)
        say(str(default_root))
        return default_root

    target = workspace.resolve_workspace(name, cwd=cwd)
    if not target.path.exists():
        raise WorkspaceNotFoundError(target.name)
    say(str(target.path))
    return target.path
