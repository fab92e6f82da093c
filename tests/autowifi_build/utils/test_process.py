from __future__ import annotations

import sys
from datetime import timedelta
from pathlib import Path

import pytest

from autowifi_build.actions import ActionContext
from autowifi_build.exceptions import (
    CommandNotExecutableError,
    CommandNotFoundError,
    InvocationTimeoutError,
)
from autowifi_build.router import dispatch
from autowifi_build.utils.process import SubprocessRunner

pytestmark = pytest.mark.anyio


async def test_returns_exit_status():
    runner = SubprocessRunner()
    assert await runner.run(sys.executable, "-c", "raise SystemExit(3)") == 3


async def test_runs_in_cwd(tmp_path: Path):
    runner = SubprocessRunner()
    script = "import pathlib; pathlib.Path('marker').write_text('x')"

    assert await runner.run(sys.executable, "-c", script, cwd=tmp_path) == 0
    assert (tmp_path / "marker").read_text() == "x"


async def test_missing_program():
    with pytest.raises(CommandNotFoundError):
        await SubprocessRunner().run("definitely-not-a-real-program-4711")


async def test_timeout_kills_process():
    runner = SubprocessRunner(timeout=timedelta(seconds=0.5))

    with pytest.raises(InvocationTimeoutError):
        await runner.run(sys.executable, "-c", "import time; time.sleep(30)")


@pytest.mark.skipif(sys.platform == "win32", reason="relies on POSIX exec")
async def test_unexecutable_program(tmp_path: Path):
    binary = tmp_path / "auto-wifi"
    binary.write_bytes(b"\x7fELFgarbage")
    binary.chmod(0o755)

    with pytest.raises(CommandNotExecutableError) as exc_info:
        await SubprocessRunner().run(str(binary))
    assert exc_info.value.exit_code == 126


@pytest.mark.skipif(sys.platform == "win32", reason="relies on POSIX exec")
async def test_corrupt_release_binary_becomes_exit_status(
    config, release_binary: Path, messages: list[str]
):
    release_binary.parent.mkdir(parents=True)
    release_binary.write_bytes(b"\x7fELFgarbage")
    release_binary.chmod(0o755)
    ctx = ActionContext(config=config, runner=SubprocessRunner())

    assert await dispatch(["run-release"], ctx) == 126
    assert any(m.startswith("Cannot execute") for m in messages)
