from __future__ import annotations

import shlex
from collections.abc import Sequence
from typing import ClassVar


class BuildError(Exception):
    """Base exception for the build orchestrator."""

    exit_code: ClassVar[int] = 1


class UnrecognizedCommandError(BuildError):
    """Raised when the requested subcommand is not in the command table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}")
        self.name = name


class DelegatedInvocationError(BuildError):
    """Raised when a delegated command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        super().__init__(
            f"'{self.command_line}' failed with exit status {self.exit_status}"
        )

    @property
    def command_line(self) -> str:
        return shlex.join(self.command)

    @property
    def exit_status(self) -> int:
        return exit_status(self.returncode)


class CommandNotFoundError(BuildError):
    """Raised when a delegated program cannot be found on PATH."""

    exit_code = 127

    def __init__(self, program: str) -> None:
        super().__init__(f"Command not found: {program}")
        self.program = program


class CommandNotExecutableError(BuildError):
    """Raised when a delegated program exists but cannot be started."""

    exit_code = 126

    def __init__(self, program: str, reason: OSError) -> None:
        super().__init__(f"Cannot execute {program}: {reason.strerror or reason}")
        self.program = program


class InvocationTimeoutError(BuildError):
    """Raised when a delegated command outlives the configured timeout."""

    exit_code = 124

    def __init__(self, command: Sequence[str], timeout: float) -> None:
        self.command = tuple(command)
        self.timeout = timeout
        super().__init__(
            f"'{shlex.join(self.command)}' timed out after {timeout:g}s and was killed"
        )


class EnvFileError(BuildError):
    """Raised when the credentials file required by the build is unusable."""


class InstallError(BuildError):
    """Raised when the release binary cannot be installed."""


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status.

    A negative return code means the child was killed by a signal, which a
    shell reports as ``128 + signal``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode
