from __future__ import annotations

import sys
from pathlib import Path

import pytest

from autowifi_build.config import BuildConfig
from autowifi_build.target import DEBUG, RELEASE, WINDOWS, BuildMode, Platform
from autowifi_build.toolchain import Cargo

TRIPLE = "x86_64-pc-windows-gnu"

native_only = pytest.mark.skipif(
    sys.platform == "win32", reason="native binaries carry .exe on Windows"
)


class TestBuildTarget:
    def test_predefined_targets(self):
        assert (DEBUG.mode, DEBUG.platform) == (BuildMode.DEBUG, Platform.NATIVE)
        assert (RELEASE.mode, RELEASE.platform) == (BuildMode.RELEASE, Platform.NATIVE)
        assert (WINDOWS.mode, WINDOWS.platform) == (BuildMode.RELEASE, Platform.FOREIGN)

    def test_cargo_flags(self):
        assert DEBUG.cargo_flags(TRIPLE) == []
        assert RELEASE.cargo_flags(TRIPLE) == ["--release"]
        assert WINDOWS.cargo_flags(TRIPLE) == ["--release", "--target", TRIPLE]

    @native_only
    def test_native_output_paths(self):
        assert DEBUG.output_path("auto-wifi", TRIPLE) == Path("target/debug/auto-wifi")
        assert RELEASE.output_path("auto-wifi", TRIPLE) == Path(
            "target/release/auto-wifi"
        )

    def test_foreign_output_path(self):
        assert WINDOWS.output_path("auto-wifi", TRIPLE) == Path(
            "target/x86_64-pc-windows-gnu/release/auto-wifi.exe"
        )


class TestCargo:
    def test_command_lines(self):
        cargo = Cargo.from_config(BuildConfig(cargo="/opt/cargo/bin/cargo"))

        assert cargo.build(RELEASE) == ["/opt/cargo/bin/cargo", "build", "--release"]
        assert cargo.run() == ["/opt/cargo/bin/cargo", "run"]
        assert cargo.clean() == ["/opt/cargo/bin/cargo", "clean"]
        assert cargo.check() == ["/opt/cargo/bin/cargo", "check"]
        assert cargo.test() == ["/opt/cargo/bin/cargo", "test"]

    def test_custom_foreign_target(self):
        cargo = Cargo.from_config(BuildConfig(foreign_target="i686-pc-windows-gnu"))

        assert cargo.build(WINDOWS)[-2:] == ["--target", "i686-pc-windows-gnu"]
        assert cargo.output_path(WINDOWS) == Path(
            "target/i686-pc-windows-gnu/release/auto-wifi.exe"
        )
