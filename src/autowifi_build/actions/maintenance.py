from __future__ import annotations

from loguru import logger

from autowifi_build.envfile import preflight

from .abc import ActionContext


async def clean(ctx: ActionContext) -> int:
    logger.warning("Cleaning build artifacts...")
    await ctx.invoke(*ctx.cargo.clean())
    logger.success("✓ Clean complete")
    return 0


async def check(ctx: ActionContext) -> int:
    """Type-check the crate without producing a binary."""
    logger.info("Checking code...")
    await preflight(ctx.config)
    await ctx.invoke(*ctx.cargo.check())
    return 0


async def test(ctx: ActionContext) -> int:
    logger.info("Running tests...")
    await preflight(ctx.config)
    await ctx.invoke(*ctx.cargo.test())
    return 0
