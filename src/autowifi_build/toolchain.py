from __future__ import annotations

from pathlib import Path

from attrs import frozen

from .config import BuildConfig
from .target import BuildTarget


@frozen
class Cargo:
    """Command lines for the Cargo subcommands the orchestrator delegates to."""

    executable: str
    foreign_target: str
    binary_name: str

    @classmethod
    def from_config(cls, config: BuildConfig) -> Cargo:
        return cls(
            executable=config.cargo,
            foreign_target=config.foreign_target,
            binary_name=config.binary_name,
        )

    def build(self, target: BuildTarget) -> list[str]:
        return [self.executable, "build", *target.cargo_flags(self.foreign_target)]

    def run(self) -> list[str]:
        return [self.executable, "run"]

    def clean(self) -> list[str]:
        return [self.executable, "clean"]

    def check(self) -> list[str]:
        return [self.executable, "check"]

    def test(self) -> list[str]:
        return [self.executable, "test"]

    def output_path(self, target: BuildTarget) -> Path:
        return target.output_path(self.binary_name, self.foreign_target)
