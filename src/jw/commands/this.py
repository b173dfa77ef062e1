"""Implementation for the ``jw this`` command."""

from __future__ import annotations

from pathlib import Path

from .. import exec as exec_util
from .. import jj, paths, workspace
from ..errors import ValidationError


def this_workspace(
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Point the default workspace at the change checked out here.

    Returns:
        The change id now checked out in the default workspace.

    Example:
        $ cd ../repo-workspaces/feature && jw this
        Switched default workspace to "feature" (kxqpzvrm)
    """
    cwd = workspace.resolve_cwd(cwd)
    current_name = paths.current_workspace_name(cwd)
    if current_name == paths.DEFAULT_WORKSPACE_NAME:
        raise ValidationError("Cannot run 'jw this' from default workspace")

    output = jj.workspace_list_output(cwd=cwd, runner=runner)
    change_id = jj.change_id_from_workspace_list(output, current_name)
    if not change_id:
        raise ValidationError(
            f'Current workspace "{current_name}" not found in jj workspace list'
        )

    workspace.switch_default_workspace(
        current_name,
        change_id,
        default_root=paths.resolve_default_root(cwd),
        runner=runner,
    )
    return change_id
