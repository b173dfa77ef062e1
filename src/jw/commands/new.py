"""Implementation for the ``jw new`` command.

``jw new`` asks jj to add a workspace in the workspaces dir, then copies the
configured files into it and runs the configured post-create commands.
"""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import fs, jj, log, paths, workspace
from ..errors import JujutsuCommandError, WorkspaceExistsError


def new_workspace(
    name: str,
    revision: str | None = None,
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> Path:
    """Create a workspace named ``name``.

    Args:
        name: Workspace name; ``/`` is normalized to ``-``.
        revision: Optional revision to check out in the new workspace.
        cwd: Directory inside the repository (defaults to the process cwd).
        runner: Optional command runner override.

    Returns:
        Path of the new workspace.

    Raises:
        WorkspaceExistsError: When the workspace directory already exists.
        JujutsuCommandError: When ``jj workspace add`` fails.

    Example:
        $ jw new feature/login -r main
    """
    cwd = workspace.resolve_cwd(cwd)
    target = workspace.resolve_workspace(name, cwd=cwd)

    if target.path.exists():
        raise WorkspaceExistsError(target.name)

    workspaces_dir = paths.workspaces_dir(cwd, target.config.workspaces_dir_suffix)
    if not workspaces_dir.exists():
        fs.ensure_dir(workspaces_dir)

    log.info(f'Creating workspace "{target.name}"...')
    result = jj.workspace_add(
        target.name, target.path, revision=revision, cwd=cwd, runner=runner
    )
    if not result.ok:
        raise JujutsuCommandError("create workspace", result.stderr)

    workspace.copy_config_files(target.config, target.path, cwd=cwd)
    workspace.run_post_create_commands(
        target.config.post_create_commands, target.path, runner=runner
    )

    log.success(f'Created workspace "{target.name}": {target.path}')
    return target.path
