"""Error contracts for jw operations.

Operations raise a ``JwError`` subclass on expected failures: validation,
missing or conflicting workspaces, and ``jj`` failures that are fatal to the
caller. The CLI catches ``JwError`` and prints ``Error: <message>``; anything
else is a bug or an unclassified I/O failure and is reported as unexpected.
"""

from __future__ import annotations

from typing import Literal

JwErrorCode = Literal[
    "not_a_repository",
    "already_exists",
    "not_found",
    "cannot_remove_default",
    "not_default_workspace",
    "external_command_failed",
    "validation_failed",
    "config_exists",
]


class JwError(Exception):
    """Expected failure of a jw operation.

    Args:
        code: Stable failure code for callers and tests.
        message: Human-readable failure summary.
    """

    def __init__(self, code: JwErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class NotARepositoryError(JwError):
    """No ancestor directory contains a ``.jj`` marker."""

    def __init__(self) -> None:
        super().__init__("not_a_repository", "Not in a jj repository")


class WorkspaceExistsError(JwError):
    """The target workspace path is already present."""

    def __init__(self, name: str) -> None:
        super().__init__("already_exists", f'Workspace "{name}" already exists')
        self.name = name


class WorkspaceNotFoundError(JwError):
    """The workspace directory or listing entry is absent."""

    def __init__(self, name: str) -> None:
        super().__init__("not_found", f'Workspace "{name}" not found')
        self.name = name


class CannotRemoveDefaultWorkspaceError(JwError):
    """The default workspace cannot be removed."""

    def __init__(self, message: str = "Cannot remove the default workspace") -> None:
        super().__init__("cannot_remove_default", message)


class CannotRenameDefaultWorkspaceError(CannotRemoveDefaultWorkspaceError):
    """The default workspace cannot be renamed."""

    def __init__(self) -> None:
        super().__init__("Cannot rename the default workspace")


class NotDefaultWorkspaceError(JwError):
    """The operation must be run from the default workspace."""

    def __init__(self) -> None:
        super().__init__(
            "not_default_workspace",
            "This command must be run from the default workspace",
        )


class JujutsuCommandError(JwError):
    """``jj`` exited non-zero for an operation whose failure is fatal."""

    def __init__(self, operation: str, stderr: str) -> None:
        super().__init__(
            "external_command_failed", f"Failed to {operation}: {stderr.strip()}"
        )
        self.operation = operation
        self.stderr = stderr


class ValidationError(JwError):
    """Missing or malformed argument, or an inconsistent precondition."""

    def __init__(self, message: str) -> None:
        super().__init__("validation_failed", message)


class ConfigAlreadyExistsError(JwError):
    """A config file already exists where ``jw init`` would write one."""

    def __init__(self, path: object) -> None:
        super().__init__("config_exists", f"Config file already exists: {path}")
        self.path = path


class RepoMarkerError(OSError):
    """``.jj/repo`` is missing or of an unexpected kind."""
