"""Command implementations exposed by the jw CLI."""

from .clean import clean_workspaces
from .copy import copy_to_workspace
from .go import go_workspace
from .init import init_workspace
from .list import list_workspaces
from .new import new_workspace
from .remove import remove_workspace
from .rename import rename_workspace
from .this import this_workspace
from .use import use_workspace

__all__ = [
    "clean_workspaces",
    "copy_to_workspace",
    "go_workspace",
    "init_workspace",
    "list_workspaces",
    "new_workspace",
    "remove_workspace",
    "rename_workspace",
    "this_workspace",
    "use_workspace",
]
