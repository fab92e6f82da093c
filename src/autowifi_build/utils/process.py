from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from datetime import timedelta
from pathlib import Path
from typing import override

import anyio
from attrs import define
from loguru import logger

from autowifi_build.exceptions import (
    CommandNotExecutableError,
    CommandNotFoundError,
    InvocationTimeoutError,
)


class Runner(ABC):
    @abstractmethod
    async def run(self, *command: str, cwd: Path | None = None) -> int:
        """Run a command to completion and return its exit status."""


@define
class SubprocessRunner(Runner):
    """Runs delegated commands as child processes sharing our stdio.

    Output streams straight to the terminal, so compiler progress and the
    launched binary's own output are shown as they happen.
    """

    timeout: timedelta | None = None

    @override
    async def run(self, *command: str, cwd: Path | None = None) -> int:
        program = shutil.which(command[0])
        if program is None:
            raise CommandNotFoundError(command[0])

        logger.debug("Running: {}", " ".join(command))
        deadline = self.timeout.total_seconds() if self.timeout is not None else None
        try:
            process = await anyio.open_process(
                [program, *command[1:]],
                cwd=cwd,
                stdin=None,
                stdout=None,
                stderr=None,
            )
        except OSError as e:
            raise CommandNotExecutableError(command[0], e) from e

        async with process:
            try:
                with anyio.fail_after(deadline):
                    returncode = await process.wait()
            except TimeoutError:
                process.kill()
                raise InvocationTimeoutError(command, deadline or 0) from None

        logger.debug("Exited with status {}: {}", returncode, command[0])
        return returncode
