"""Implementation for the ``jw copy`` command."""

from __future__ import annotations

from pathlib import Path

from .. import log, workspace
from ..errors import WorkspaceNotFoundError


def copy_to_workspace(name: str, *, cwd: Path | None = None) -> Path:
    """Re-copy the configured files from the default workspace into ``name``.

    Example:
        $ jw copy feature
    """
    cwd = workspace.resolve_cwd(cwd)
    target = workspace.resolve_workspace(name, cwd=cwd)
    if not target.path.exists():
        raise WorkspaceNotFoundError(target.name)

    log.info(f'Copying files to workspace "{target.name}"...')
    workspace.copy_config_files(target.config, target.path, cwd=cwd)
    log.success("Copy completed")
    return target.path
