"""Typer entry point for the jw CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer

from . import __version__, jj, paths
from . import log as jw_log
from .commands import clean as clean_cmd
from .commands import copy as copy_cmd
from .commands import go as go_cmd
from .commands import init as init_cmd
from .commands import list as list_cmd
from .commands import new as new_cmd
from .commands import remove as remove_cmd
from .commands import rename as rename_cmd
from .commands import this as this_cmd
from .commands import use as use_cmd
from .errors import JwError

app = typer.Typer(
    name="jw",
    help="Manage jj workspaces that live next to the default workspace.",
    no_args_is_help=True,
)


def _complete_workspace_names(incomplete: str) -> list[str]:
    try:
        names = jj.list_workspace_names(cwd=Path.cwd())
    except (JwError, OSError):
        return []
    return [name for name in names if name.startswith(incomplete)]


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if value.strip().lower() not in jw_log.LEVEL_NAMES:
        raise typer.BadParameter(f"expected one of: {', '.join(jw_log.LEVEL_NAMES)}")
    return value


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _run(func: Callable[..., object], *args: object, **kwargs: object) -> None:
    try:
        func(*args, **kwargs)
    except JwError as exc:
        jw_log.error(f"Error: {exc}")
        raise typer.Exit(1) from exc
    except Exception as exc:
        jw_log.error(f"Unexpected error: {exc}")
        raise typer.Exit(1) from exc


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        callback=_validate_log_level,
        help="log level (trace|debug|info|success|warning|error)",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="disable colored output"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="show the jw version and exit",
    ),
) -> None:
    """Manage jj workspaces that live next to the default workspace."""
    if log_level is not None:
        jw_log.set_level(log_level)
    if no_color:
        jw_log.set_no_color(True)


@app.command("init")
def init_command() -> None:
    """Write a default .jwconfig into the default workspace."""
    _run(init_cmd.init_workspace)


@app.command("new")
def new_command(
    name: str = typer.Argument(..., help="workspace name"),
    revision: Optional[str] = typer.Option(
        None, "--revision", "-r", help="revision to check out in the new workspace"
    ),
) -> None:
    """Create a new workspace."""
    _run(new_cmd.new_workspace, name, revision)


@app.command("list")
def list_command() -> None:
    """List all workspaces."""
    _run(list_cmd.list_workspaces)


@app.command("go")
def go_command(
    name: str = typer.Argument(
        paths.DEFAULT_WORKSPACE_NAME,
        help="workspace name",
        autocompletion=_complete_workspace_names,
    ),
) -> None:
    """Print a workspace path (defaults to the default workspace)."""
    _run(go_cmd.go_workspace, name)


@app.command("rm")
def remove_command(
    name: str = typer.Argument(
        ..., help="workspace name", autocompletion=_complete_workspace_names
    ),
) -> None:
    """Remove a workspace."""
    _run(remove_cmd.remove_workspace, name)


@app.command("rename")
def rename_command(
    old_name: str = typer.Argument(
        ..., help="current workspace name", autocompletion=_complete_workspace_names
    ),
    new_name: str = typer.Argument(..., help="new workspace name"),
) -> None:
    """Rename a workspace."""
    _run(rename_cmd.rename_workspace, old_name, new_name)


@app.command("copy")
def copy_command(
    name: str = typer.Argument(
        ..., help="workspace name", autocompletion=_complete_workspace_names
    ),
) -> None:
    """Copy configured files from the default workspace into a workspace."""
    _run(copy_cmd.copy_to_workspace, name)


@app.command("clean")
def clean_command() -> None:
    """Forget workspaces whose directories no longer exist."""
    _run(clean_cmd.clean_workspaces)


@app.command("this")
def this_command() -> None:
    """Check out the current workspace's change in the default workspace."""
    _run(this_cmd.this_workspace)


@app.command("use")
def use_command(
    name: str = typer.Argument(
        ..., help="workspace name", autocompletion=_complete_workspace_names
    ),
) -> None:
    """Check out a workspace's change in the default workspace."""
    _run(use_cmd.use_workspace, name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
