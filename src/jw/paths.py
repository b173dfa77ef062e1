"""Path helpers for locating a jj repository and its workspaces on disk.

The default workspace is the checkout whose ``.jj/repo`` entry is a directory.
Every other workspace carries a ``.jj/repo`` *file* that points back at the
default workspace's ``.jj/repo`` directory. Named workspaces live in a sibling
"workspaces dir" of the default workspace::

    ~/src/myrepo/                  default workspace
    ~/src/myrepo-workspaces/feat/  workspace "feat"
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import NotARepositoryError, RepoMarkerError

JJ_DIRNAME = ".jj"
REPO_MARKER_NAME = "repo"
DEFAULT_WORKSPACE_NAME = "default"
WORKSPACES_DIR_SUFFIX = "-workspaces"
CONFIG_FILENAME = ".jwconfig"


@dataclass(frozen=True)
class DefaultLocation:
    """``.jj/repo`` is a directory: ``root`` is the default workspace."""

    root: Path

    @property
    def default_root(self) -> Path:
        return self.root


@dataclass(frozen=True)
class LinkedLocation:
    """``.jj/repo`` is a file pointing at the default workspace's ``.jj/repo``.

    Attributes:
        root: Root of the secondary workspace.
        pointer: Trimmed content of ``<root>/.jj/repo``.
    """

    root: Path
    pointer: str

    @property
    def default_root(self) -> Path:
        repo_dir = Path(self.pointer)
        if not repo_dir.is_absolute():
            # jj resolves relative pointers against the workspace's .jj dir.
            repo_dir = Path(os.path.normpath(self.root / JJ_DIRNAME / repo_dir))
        return repo_dir.parent.parent


RepoLocation = DefaultLocation | LinkedLocation


def normalize_workspace_name(name: str) -> str:
    """Map a user-supplied workspace name to a filesystem-safe name.

    Only ``/`` is rewritten (to ``-``); case and whitespace are preserved.

    Args:
        name: Raw workspace name.

    Returns:
        Name without path separators.

    Example:
        >>> normalize_workspace_name("feature/auth/login")
        'feature-auth-login'
        >>> normalize_workspace_name("///")
        '---'
    """
    return name.replace("/", "-")


def find_repo_root(start: Path) -> Path:
    """Return the nearest ancestor of ``start`` that contains ``.jj``.

    ``start`` itself is checked first; the filesystem root is never checked.

    Args:
        start: Directory to start searching from.

    Returns:
        Root of the workspace containing ``start``.

    Raises:
        NotARepositoryError: When no ancestor contains the marker.
    """
    current = Path(os.path.abspath(start))
    while current != current.parent:
        if (current / JJ_DIRNAME).exists():
            return current
        current = current.parent
    raise NotARepositoryError()


def repo_marker_path(root: Path) -> Path:
    """Return the ``.jj/repo`` entry for a workspace root."""
    return root / JJ_DIRNAME / REPO_MARKER_NAME


def inspect_marker(root: Path) -> RepoLocation:
    """Classify the workspace at ``root`` as default or linked.

    Args:
        root: Workspace root returned by ``find_repo_root``.

    Returns:
        ``DefaultLocation`` or ``LinkedLocation``.

    Raises:
        RepoMarkerError: When ``.jj/repo`` is missing or neither a directory
            nor a regular file.
    """
    marker = repo_marker_path(root)
    if not marker.exists():
        raise RepoMarkerError(f"Could not find {JJ_DIRNAME}/{REPO_MARKER_NAME} in {root}")
    if marker.is_dir():
        return DefaultLocation(root=root)
    if marker.is_file():
        return LinkedLocation(
            root=root, pointer=marker.read_text(encoding="utf-8").strip()
        )
    raise RepoMarkerError(f"Unexpected {JJ_DIRNAME}/{REPO_MARKER_NAME} entry: {marker}")


def locate(start: Path) -> RepoLocation:
    """Locate the workspace containing ``start`` and classify it."""
    return inspect_marker(find_repo_root(start))


def resolve_default_root(start: Path) -> Path:
    """Return the root of the default workspace for the repo around ``start``."""
    return locate(start).default_root


def workspaces_dir_name(repo_name: str, suffix: str | None = None) -> str:
    """Return the name of the directory holding named workspaces.

    Args:
        repo_name: Directory name of the default workspace.
        suffix: Suffix override. ``None`` means "not provided" and uses
            ``WORKSPACES_DIR_SUFFIX``; an empty string is a real override.

    Returns:
        Workspaces directory name.

    Example:
        >>> workspaces_dir_name("my-repo")
        'my-repo-workspaces'
        >>> workspaces_dir_name("my-repo", "-ws")
        'my-repo-ws'
        >>> workspaces_dir_name("my-repo", "")
        'my-repo'
    """
    return f"{repo_name}{WORKSPACES_DIR_SUFFIX if suffix is None else suffix}"


def workspaces_dir(start: Path, suffix: str | None = None) -> Path:
    """Return the sibling directory that holds the repo's named workspaces."""
    default_root = resolve_default_root(start)
    return default_root.parent / workspaces_dir_name(default_root.name, suffix)


def workspace_path(start: Path, name: str, suffix: str | None = None) -> Path:
    """Return the on-disk path for the workspace ``name``."""
    return workspaces_dir(start, suffix) / normalize_workspace_name(name)


def current_workspace_name(start: Path) -> str:
    """Return the name of the workspace containing ``start``.

    The default workspace is reported as ``DEFAULT_WORKSPACE_NAME``; any other
    workspace by its directory name.
    """
    location = locate(start)
    if location.root == location.default_root:
        return DEFAULT_WORKSPACE_NAME
    return location.root.name
