from __future__ import annotations

import anyio
from loguru import logger

from autowifi_build.envfile import preflight
from autowifi_build.exceptions import exit_status
from autowifi_build.target import RELEASE

from .abc import ActionContext
from .build import build_target

CHROMEDRIVER_NOTE = "Note: ChromeDriver will be started automatically"


async def run(ctx: ActionContext) -> int:
    """Build and run the debug binary through ``cargo run``."""
    logger.info("Running {}...", ctx.config.binary_name)
    logger.warning(CHROMEDRIVER_NOTE)
    await preflight(ctx.config)
    await ctx.invoke(*ctx.cargo.run())
    return 0


async def run_release(ctx: ActionContext) -> int:
    """
    Run the optimized binary, building it first only if it is missing.

    The binary's own exit status becomes ours.
    """
    logger.info("Running optimized release build...")
    logger.warning(CHROMEDRIVER_NOTE)

    binary = ctx.root / ctx.cargo.output_path(RELEASE)
    if not await anyio.Path(binary).is_file():
        logger.warning("Release binary not found. Building...")
        binary = await build_target(ctx, RELEASE)

    returncode = await ctx.runner.run(str(binary), cwd=ctx.root)
    return exit_status(returncode)
