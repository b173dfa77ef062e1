"""Workspace resolution and setup steps shared by the jw commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from . import config, fs, jj, log, paths
from . import exec as exec_util
from .errors import JujutsuCommandError
from .models import JwConfig

MISSING_MARK = "✗"
CURRENT_MARK = "*"


@dataclass(frozen=True)
class ResolvedWorkspace:
    """A workspace name resolved against the current configuration.

    Attributes:
        config: Configuration loaded for this resolution.
        name: Normalized workspace name.
        path: Directory the workspace lives (or would live) in.
    """

    config: JwConfig
    name: str
    path: Path


@dataclass(frozen=True)
class WorkspaceStatus:
    name: str
    path: Path
    exists: bool
    current: bool


def resolve_cwd(cwd: Path | None) -> Path:
    return cwd if cwd is not None else Path.cwd()


def resolve_workspace(name: str, *, cwd: Path) -> ResolvedWorkspace:
    """Load the config and resolve ``name`` to its normalized name and path."""
    payload = config.load_config(cwd)
    normalized = paths.normalize_workspace_name(name)
    path = paths.workspace_path(cwd, normalized, payload.workspaces_dir_suffix)
    return ResolvedWorkspace(config=payload, name=normalized, path=path)


def copy_config_files(payload: JwConfig, workspace_dir: Path, *, cwd: Path) -> None:
    """Copy the configured files from the default workspace into ``workspace_dir``.

    Entries are always relative to the default workspace; a leading ``/`` is
    ignored.
    """
    default_root = paths.resolve_default_root(cwd)
    for entry in payload.copy_files:
        log.info(f'Copying "{entry}"...')
        fs.copy_path_into(default_root / entry.lstrip("/"), workspace_dir)


def run_post_create_commands(
    commands: list[str],
    workspace_dir: Path,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Run each command in ``workspace_dir``; failures are reported, not raised."""
    for command in commands:
        argv = command.split()
        if not argv:
            continue
        log.info(f"Running command: {command}")
        result = exec_util.run_command(argv, cwd=workspace_dir, runner=runner)
        if not result.ok:
            log.warning(f"Command failed: {command}")
            if result.stderr.strip():
                log.warning(result.stderr.rstrip())


def format_default_workspace_line(default_path: Path, current_path: Path) -> str:
    """Render the ``jw list`` line for the default workspace.

    Example:
        >>> format_default_workspace_line(Path("/repo"), Path("/repo"))
        '* default (/repo)'
    """
    mark = CURRENT_MARK if current_path == default_path else " "
    return f"{mark} {paths.DEFAULT_WORKSPACE_NAME} ({default_path})"


def format_workspace_line(
    name: str, workspace_path: Path, current_path: Path, exists: bool
) -> str:
    """Render the ``jw list`` line for a named workspace.

    Example:
        >>> format_workspace_line("feature", Path("/r-ws/feature"), Path("/repo"), False)
        '  feature ✗'
    """
    path_info = f"({workspace_path})" if exists else MISSING_MARK
    mark = CURRENT_MARK if current_path == workspace_path else " "
    return f"{mark} {name} {path_info}"


def switch_default_workspace(
    workspace_name: str,
    change_id: str,
    *,
    default_root: Path,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Check out ``change_id`` in the default workspace.

    Raises:
        JujutsuCommandError: When ``jj edit`` fails.
    """
    result = jj.edit(change_id, cwd=default_root, runner=runner)
    if not result.ok:
        raise JujutsuCommandError("switch default workspace", result.stderr)
    log.success(f'Switched default workspace to "{workspace_name}" ({change_id})')
