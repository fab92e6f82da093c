from __future__ import annotations

from pathlib import Path

from loguru import logger

from autowifi_build.envfile import preflight
from autowifi_build.target import DEBUG, RELEASE, WINDOWS, BuildTarget

from .abc import ActionContext


async def build_target(ctx: ActionContext, target: BuildTarget) -> Path:
    """Compile `target` and return the absolute path of the artifact."""
    await preflight(ctx.config)
    await ctx.invoke(*ctx.cargo.build(target))
    return ctx.root / ctx.cargo.output_path(target)


async def build(ctx: ActionContext) -> int:
    logger.info("Building in debug mode...")
    await build_target(ctx, DEBUG)
    logger.success("✓ Build complete: {}", ctx.cargo.output_path(DEBUG).as_posix())
    return 0


async def release(ctx: ActionContext) -> int:
    logger.info("Building in release mode (optimized)...")
    await build_target(ctx, RELEASE)
    logger.success(
        "✓ Release build complete: {}", ctx.cargo.output_path(RELEASE).as_posix()
    )
    return 0


async def windows(ctx: ActionContext) -> int:
    logger.info("Building for Windows (64-bit)...")
    await build_target(ctx, WINDOWS)
    output = ctx.cargo.output_path(WINDOWS)
    logger.success("✓ Windows build complete: {}", output.as_posix())
    # the binary drives Chrome through a chromedriver found next to it
    logger.warning(
        "Note: Copy {} along with chromedriver.exe to the Windows machine",
        output.name,
    )
    return 0
