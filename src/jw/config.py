"""Configuration helpers for jw repositories.

This module reads and writes the ``.jwconfig`` JSON file that lives in the
default workspace root and validates it with the ``JwConfig`` Pydantic model.
The file is reloaded on every call; nothing is cached.

Example:
    >>> from jw.config import parse_config
    >>> parse_config({"postCreateCommands": ["npm install"]}).post_create_commands
    ['npm install']
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError

from . import log, paths
from .errors import ConfigAlreadyExistsError
from .models import JwConfig


def load_json(path: Path) -> object | None:
    """Load a JSON file if it exists.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed payload, or ``None`` if the file does not exist.

    Example:
        >>> from pathlib import Path
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def write_json(path: Path, payload: dict | BaseModel) -> None:
    """Write a JSON payload to disk with two-space indentation."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True, exclude_none=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
        fh.write("\n")


def config_path(cwd: Path) -> Path:
    """Return the config file path for the repository around ``cwd``."""
    return paths.resolve_default_root(cwd) / paths.CONFIG_FILENAME


def default_config() -> JwConfig:
    """Return the configuration used when no config file exists.

    Example:
        >>> default_config().workspaces_dir_suffix
        '-workspaces'
    """
    return JwConfig(workspaces_dir_suffix=paths.WORKSPACES_DIR_SUFFIX)


def parse_config(payload: object) -> JwConfig:
    """Validate a raw config payload, falling back to defaults.

    Example:
        >>> parse_config(None) == default_config()
        True
        >>> parse_config({"copyFiles": "nope"}).copy_files
        []
    """
    if not isinstance(payload, dict):
        return default_config()
    try:
        return JwConfig.model_validate(payload)
    except ValidationError:
        return default_config()


def load_config(cwd: Path) -> JwConfig:
    """Load the config for the repository around ``cwd``.

    A missing file yields the defaults; an unreadable or invalid file is
    reported and also yields the defaults.
    """
    path = config_path(cwd)
    try:
        payload = load_json(path)
    except (OSError, ValueError) as exc:
        log.error(f"Failed to load config file: {exc}")
        return default_config()
    if payload is None:
        return default_config()
    return parse_config(payload)


def write_config(path: Path, payload: JwConfig) -> None:
    """Write a config model to ``path``."""
    write_json(path, payload)


def init_config(cwd: Path) -> Path:
    """Create a config file with default values.

    Raises:
        ConfigAlreadyExistsError: When the file already exists.
    """
    path = config_path(cwd)
    if path.exists():
        raise ConfigAlreadyExistsError(path)
    write_config(path, default_config())
    return path
