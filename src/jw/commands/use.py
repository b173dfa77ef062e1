"""Implementation for the ``jw use`` command."""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import jj, paths, workspace
from ..errors import NotDefaultWorkspaceError, ValidationError


def use_workspace(
    name: str | None,
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Check out another workspace's change in the default workspace.

    Must be run from the default workspace, since that is what changes.

    Returns:
        The change id now checked out in the default workspace.

    Example:
        $ jw use feature
        Switched default workspace to "feature" (kxqpzvrm)
    """
    if not name:
        raise ValidationError("Workspace name is required")
    if name == paths.DEFAULT_WORKSPACE_NAME:
        raise ValidationError("Cannot use the default workspace")

    cwd = workspace.resolve_cwd(cwd)
    location = paths.locate(cwd)
    if location.root != location.default_root:
        raise NotDefaultWorkspaceError()

    normalized = paths.normalize_workspace_name(name)
    change_id = jj.workspace_change_id(normalized, cwd=cwd, runner=runner)
    workspace.switch_default_workspace(
        normalized, change_id, default_root=location.default_root, runner=runner
    )
    return change_id
