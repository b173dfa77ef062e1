"""Filesystem helpers for populating and tearing down workspaces."""

from __future__ import annotations

import shutil
from pathlib import Path

from . import log


def ensure_dir(path: Path) -> None:
    """Create a directory and its parents if they do not exist.

    Args:
        path: Directory path to ensure exists.

    Returns:
        None.
    """
    path.mkdir(parents=True, exist_ok=True)


def copy_path_into(src: Path, dest_dir: Path) -> None:
    """Copy ``src`` into ``dest_dir``, keeping its base name.

    A missing ``src`` only logs a warning: copy lists may name optional
    files. Directories are copied recursively and merged into an existing
    destination, files keep their permission bits and timestamps.

    Args:
        src: File or directory to copy.
        dest_dir: Existing directory to copy into.

    Returns:
        None.
    """
    if not src.exists():
        log.warning(f"Source does not exist: {src}")
        return
    target = dest_dir / src.name
    if src.is_dir():
        shutil.copytree(src, target, symlinks=True, dirs_exist_ok=True)
    else:
        shutil.copy2(src, target)


def remove_tree(path: Path) -> None:
    """Delete ``path`` recursively; a missing path is a no-op."""
    if path.is_symlink() or path.is_file():
        path.unlink()
        return
    if path.exists():
        shutil.rmtree(path)


def move_tree(src: Path, dest: Path) -> None:
    """Move a directory to ``dest``, across filesystems if needed."""
    ensure_dir(dest.parent)
    shutil.move(str(src), str(dest))
