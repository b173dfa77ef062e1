"""Subprocess helpers for running external commands."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

from . import log


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result.

    Output streams are captured in full; nothing is streamed while the
    process runs.
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess.

    A non-zero exit status is returned, never raised. ``None`` means the
    executable could not be found. Output that is not valid UTF-8 is decoded
    with replacement characters.
    """

    def run(self, request: CommandRequest) -> CommandResult | None:
        if request.cwd is not None and not Path(request.cwd).is_dir():
            return missing_cwd_result(request)
        try:
            completed = subprocess.run(
                list(request.argv),
                cwd=request.cwd,
                env=request.env,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError:
            return None

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()

MISSING_COMMAND_EXIT_CODE = 127
MISSING_CWD_EXIT_CODE = 1


def missing_command_result(request: CommandRequest) -> CommandResult:
    """Describe a missing executable as a failed command result."""
    program = request.argv[0] if request.argv else ""
    return CommandResult(
        argv=request.argv,
        returncode=MISSING_COMMAND_EXIT_CODE,
        stdout="",
        stderr=f"missing required command: {program}",
    )


def missing_cwd_result(request: CommandRequest) -> CommandResult:
    """Describe a missing working directory as a failed command result."""
    return CommandResult(
        argv=request.argv,
        returncode=MISSING_CWD_EXIT_CODE,
        stdout="",
        stderr=f"working directory does not exist: {request.cwd}",
    )


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    where = f" (in {request.cwd})" if request.cwd else ""
    log.debug(f"$ {' '.join(request.argv)}{where}")
    return active_runner.run(request)


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Run a command and always return a result.

    A missing executable is reported as exit status 127 with an explanatory
    stderr, so callers only ever inspect ``returncode``.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory (defaults to the process cwd).
        runner: Optional runner override.

    Returns:
        ``CommandResult`` for the finished process.
    """
    request = CommandRequest(argv=tuple(cmd), cwd=cwd)
    result = run_with_runner(request, runner=runner)
    if result is None:
        return missing_command_result(request)
    return result
