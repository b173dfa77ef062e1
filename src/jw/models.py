"""Pydantic models for jw configuration data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JwConfig(BaseModel):
    """Per-repository workspace setup configuration.

    Stored as ``.jwconfig`` in the default workspace root with camelCase keys.
    Malformed values fall back to their defaults instead of failing.

    Attributes:
        copy_files: Paths, relative to the default workspace, copied into
            new workspaces.
        post_create_commands: Commands run in a new workspace after creation.
        workspaces_dir_suffix: Suffix for the workspaces dir name. ``None``
            (also used for an empty string) selects the built-in default.

    Example:
        >>> JwConfig.model_validate({"copyFiles": [".env"], "workspacesDirSuffix": ""})
        JwConfig(copy_files=['.env'], post_create_commands=[], workspaces_dir_suffix=None)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    copy_files: list[str] = Field(default_factory=list, alias="copyFiles")
    post_create_commands: list[str] = Field(
        default_factory=list, alias="postCreateCommands"
    )
    workspaces_dir_suffix: str | None = Field(default=None, alias="workspacesDirSuffix")

    @field_validator("copy_files", "post_create_commands", mode="before")
    @classmethod
    def normalize_string_list(cls, value: object) -> object:
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        return []

    @field_validator("workspaces_dir_suffix", mode="before")
    @classmethod
    def normalize_suffix(cls, value: object) -> object:
        if isinstance(value, str) and value != "":
            return value
        return None