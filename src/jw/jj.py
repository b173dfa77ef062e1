"""Jujutsu (``jj``) helper functions used by the jw CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from . import exec as exec_util
from .errors import JujutsuCommandError, WorkspaceNotFoundError

JJ_EXECUTABLE = "jj"


@dataclass(frozen=True)
class WorkspaceListEntry:
    """One line of ``jj workspace list`` output.

    Attributes:
        name: Workspace name (text before the first colon).
        rest: Remainder of the line after the colon, trimmed.
    """

    name: str
    rest: str

    @property
    def change_id(self) -> str | None:
        parts = self.rest.split()
        return parts[0] if parts else None


def jj_command(args: list[str]) -> list[str]:
    """Build a jj command line."""
    return [JJ_EXECUTABLE, *args]


def run_jj(
    args: list[str],
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult:
    """Run ``jj`` with ``args``; never raises for a non-zero exit."""
    return exec_util.run_command(jj_command(args), cwd=cwd, runner=runner)


def parse_workspace_list(output: str) -> list[WorkspaceListEntry]:
    """Parse ``jj workspace list`` output.

    Each line looks like ``name: change_id commit_id ...``. Lines without a
    non-empty name before the first colon are dropped.

    Args:
        output: Raw command stdout.

    Returns:
        Parsed entries in listing order.

    Example:
        >>> [e.name for e in parse_workspace_list("invalid line\\n: missing-name\\nok: id")]
        ['ok']
        >>> parse_workspace_list(" \\n\\t")
        []
    """
    entries: list[WorkspaceListEntry] = []
    for line in output.splitlines():
        colon_index = line.find(":")
        if colon_index <= 0:
            continue
        name = line[:colon_index].strip()
        if not name:
            continue
        entries.append(WorkspaceListEntry(name=name, rest=line[colon_index + 1 :].strip()))
    return entries


def workspace_names(output: str) -> list[str]:
    """Return the workspace names from ``jj workspace list`` output."""
    return [entry.name for entry in parse_workspace_list(output)]


def change_id_from_workspace_list(output: str, workspace_name: str) -> str | None:
    """Extract the change id of ``workspace_name`` from listing output.

    Example:
        >>> change_id_from_workspace_list(
        ...     "default: abc123 commit456\\nfeature-x: def789 commit000\\n", "feature-x"
        ... )
        'def789'
        >>> change_id_from_workspace_list("", "feature-x") is None
        True
    """
    for entry in parse_workspace_list(output):
        if entry.name == workspace_name:
            return entry.change_id
    return None


def workspace_list_output(
    *, cwd: Path | None = None, runner: exec_util.CommandRunner | None = None
) -> str:
    """Return raw ``jj workspace list`` output.

    Raises:
        JujutsuCommandError: When ``jj`` exits non-zero.
    """
    result = run_jj(["workspace", "list"], cwd=cwd, runner=runner)
    if not result.ok:
        raise JujutsuCommandError("list workspaces", result.stderr)
    return result.stdout


def list_workspace_names(
    *, cwd: Path | None = None, runner: exec_util.CommandRunner | None = None
) -> list[str]:
    """Return the names of all workspaces known to ``jj``."""
    return workspace_names(workspace_list_output(cwd=cwd, runner=runner))


def workspace_change_id(
    workspace_name: str,
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Return the change id checked out in ``workspace_name``.

    Raises:
        WorkspaceNotFoundError: When the workspace is absent from the listing.
        JujutsuCommandError: When ``jj workspace list`` fails.
    """
    output = workspace_list_output(cwd=cwd, runner=runner)
    change_id = change_id_from_workspace_list(output, workspace_name)
    if not change_id:
        raise WorkspaceNotFoundError(workspace_name)
    return change_id


def workspace_add(
    name: str,
    path: Path,
    *,
    revision: str | None = None,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult:
    args = ["workspace", "add", "--name", name]
    if revision:
        args.extend(["--revision", revision])
    args.append(str(path))
    return run_jj(args, cwd=cwd, runner=runner)


def workspace_forget(
    name: str,
    *,
    cwd: Path | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult:
    return run_jj(["workspace", "forget", name], cwd=cwd, runner=runner)


def workspace_rename(
    new_name: str,
    *,
    cwd: Path,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult:
    """Rename the workspace checked out at ``cwd`` to ``new_name``."""
    return run_jj(["workspace", "rename", new_name], cwd=cwd, runner=runner)


def edit(
    change_id: str,
    *,
    cwd: Path,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult:
    """Check out ``change_id`` in the workspace at ``cwd``."""
    return run_jj(["edit", change_id], cwd=cwd, runner=runner)
