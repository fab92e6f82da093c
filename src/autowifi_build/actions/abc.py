from __future__ import annotations

from pathlib import Path
from typing import Protocol

from attrs import field, frozen

from autowifi_build.config import BuildConfig
from autowifi_build.exceptions import DelegatedInvocationError
from autowifi_build.toolchain import Cargo
from autowifi_build.utils.process import Runner


@frozen
class ActionContext:
    config: BuildConfig
    runner: Runner
    cargo: Cargo = field()

    @cargo.default
    def _cargo(self) -> Cargo:
        return Cargo.from_config(self.config)

    @property
    def root(self) -> Path:
        return self.config.project_root

    async def invoke(self, *command: str) -> None:
        """Run a delegated command in the project root, raising on failure."""
        returncode = await self.runner.run(*command, cwd=self.root)
        if returncode != 0:
            raise DelegatedInvocationError(command, returncode)


class ActionProtocol(Protocol):
    async def __call__(self, ctx: ActionContext) -> int:
        """
        Carry out one subcommand.

        Returns:
            The process exit status.

        Raises:
            BuildError: when a step fails; remaining steps are skipped.
        """
        ...
