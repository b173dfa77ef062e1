"""Implementation for the ``jw init`` command.

``jw init`` writes a ``.jwconfig`` with default values into the default
workspace root.
"""

from __future__ import annotations

from pathlib import Path

from .. import config, log, paths, workspace


def init_workspace(*, cwd: Path | None = None) -> Path:
    """Create the jw config file for the current repository.

    Raises:
        NotARepositoryError: Outside a jj repository.
        ConfigAlreadyExistsError: When a config file already exists.

    Example:
        $ jw init
        Initialized jw config: /src/repo/.jwconfig
    """
    cwd = workspace.resolve_cwd(cwd)
    paths.find_repo_root(cwd)
    path = config.init_config(cwd)
    log.success(f"Initialized jw config: {path}")
    return path
