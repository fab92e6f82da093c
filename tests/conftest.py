from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import override

import pytest
from attrs import define, field
from loguru import logger

from autowifi_build.actions import ActionContext
from autowifi_build.config import BuildConfig
from autowifi_build.target import RELEASE
from autowifi_build.utils.process import Runner


@define
class FakeRunner(Runner):
    """Records delegated commands instead of running them.

    `results` scripts exit statuses per command line (default 0), and
    `artifacts` names a file to create when that command line succeeds.
    """

    results: dict[tuple[str, ...], int] = field(factory=dict)
    artifacts: dict[tuple[str, ...], Path] = field(factory=dict)
    calls: list[tuple[str, ...]] = field(factory=list)

    @override
    async def run(self, *command: str, cwd: Path | None = None) -> int:
        self.calls.append(command)
        returncode = self.results.get(command, 0)
        if returncode == 0 and (artifact := self.artifacts.get(command)):
            artifact.parent.mkdir(parents=True, exist_ok=True)
            artifact.write_bytes(b"\x7fELF")
        return returncode


RELEASE_BUILD = ("cargo", "build", "--release")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def config(tmp_path: Path) -> BuildConfig:
    root = tmp_path / "project"
    root.mkdir()
    (root / ".env").write_text(
        "# router credentials\n"
        "ROUTER_IP=192.168.1.1\n"
        "ROUTER_PASSWORD=hunter2\n"
        "PPPOE_CREDENTIALS=user1:pass1,user2:pass2\n",
        encoding="utf-8",
    )
    return BuildConfig(
        project_root=root,
        user_bin_dir=tmp_path / "home" / ".local" / "bin",
        system_bin_dir=tmp_path / "usr" / "local" / "bin",
        elevate_command=("sudo",),
    )


@pytest.fixture
def release_binary(config: BuildConfig) -> Path:
    return config.project_root / RELEASE.output_path(
        config.binary_name, config.foreign_target
    )


@pytest.fixture
def runner(release_binary: Path) -> FakeRunner:
    return FakeRunner(artifacts={RELEASE_BUILD: release_binary})


@pytest.fixture
def ctx(config: BuildConfig, runner: FakeRunner) -> ActionContext:
    return ActionContext(config=config, runner=runner)


@pytest.fixture
def messages() -> Iterator[list[str]]:
    """Messages logged by autowifi_build while the test runs."""
    records: list[str] = []
    logger.enable("autowifi_build")
    handler_id = logger.add(
        lambda message: records.append(message.record["message"]),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)
    logger.disable("autowifi_build")
