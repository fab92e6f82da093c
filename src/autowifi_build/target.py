from __future__ import annotations

import sys
from enum import StrEnum
from pathlib import Path
from typing import Final

from attrs import frozen


class BuildMode(StrEnum):
    DEBUG = "debug"
    RELEASE = "release"


class Platform(StrEnum):
    NATIVE = "native"
    FOREIGN = "foreign"


@frozen
class BuildTarget:
    """
    A build artifact, identified by optimisation mode and platform.

    Native artifacts land in ``target/<mode>/``; foreign ones are placed by
    Cargo under ``target/<triple>/<mode>/`` and always carry the Windows
    ``.exe`` suffix, since the only foreign platform built is 64-bit Windows.
    """

    mode: BuildMode
    platform: Platform = Platform.NATIVE

    @property
    def is_foreign(self) -> bool:
        return self.platform is Platform.FOREIGN

    def exe_suffix(self) -> str:
        if self.is_foreign or sys.platform == "win32":
            return ".exe"
        return ""

    def cargo_flags(self, foreign_target: str) -> list[str]:
        flags: list[str] = []
        if self.mode is BuildMode.RELEASE:
            flags.append("--release")
        if self.is_foreign:
            flags.extend(["--target", foreign_target])
        return flags

    def output_path(self, binary_name: str, foreign_target: str) -> Path:
        """Artifact location relative to the project root."""
        base = Path("target")
        if self.is_foreign:
            base /= foreign_target
        return base / self.mode.value / f"{binary_name}{self.exe_suffix()}"


DEBUG: Final = BuildTarget(BuildMode.DEBUG)
RELEASE: Final = BuildTarget(BuildMode.RELEASE)
WINDOWS: Final = BuildTarget(BuildMode.RELEASE, Platform.FOREIGN)
