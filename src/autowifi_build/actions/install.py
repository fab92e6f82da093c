from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import override

import anyio
import anyio.to_thread
from attrs import frozen
from loguru import logger

from autowifi_build.config import BuildConfig
from autowifi_build.exceptions import InstallError
from autowifi_build.target import RELEASE

from .abc import ActionContext
from .build import build_target


def display_path(path: Path) -> str:
    """Render `path` with ``~`` for the home directory, as a shell user would type it."""
    try:
        return f"~/{path.relative_to(Path.home()).as_posix()}"
    except ValueError:
        return path.as_posix()


@frozen
class InstallTier(ABC):
    """One destination in the install fallback list."""

    directory: Path

    @abstractmethod
    async def prepare(self) -> bool:
        """Make the directory usable. ``False`` hands over to the next tier."""

    @abstractmethod
    async def install(self, ctx: ActionContext, binary: Path) -> Path:
        """Copy `binary` into the directory and return the installed path.

        Failures here are fatal and never fall through to another tier.
        """


@frozen
class UserLocalTier(InstallTier):
    """Per-user bin directory, writable without elevated privileges."""

    @override
    async def prepare(self) -> bool:
        directory = anyio.Path(self.directory)
        if await directory.is_dir():
            return True
        try:
            await directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug("Cannot create {}: {}", self.directory, e)
            return False
        return True

    @override
    async def install(self, ctx: ActionContext, binary: Path) -> Path:
        destination = self.directory / binary.name
        try:
            await anyio.to_thread.run_sync(shutil.copy2, binary, destination)
        except OSError as e:
            raise InstallError(f"Failed to copy {binary} to {destination}: {e}") from e

        shown = display_path(self.directory)
        logger.success("✓ Installed to {}", display_path(destination))
        logger.warning("Make sure {} is in your PATH", shown)
        logger.info("Add this to your ~/.bashrc if needed:")
        snippet_dir = shown.replace("~", "$HOME", 1) if shown.startswith("~/") else shown
        logger.info('  export PATH="{}:$PATH"', snippet_dir)
        return destination


@frozen
class SystemTier(InstallTier):
    """System-wide bin directory, written through an elevation command."""

    elevate_command: tuple[str, ...]

    @override
    async def prepare(self) -> bool:
        return bool(self.elevate_command)

    @override
    async def install(self, ctx: ActionContext, binary: Path) -> Path:
        destination = self.directory / binary.name
        logger.warning(
            "Installing to {} (requires {})...",
            self.directory.as_posix(),
            self.elevate_command[0],
        )
        await ctx.invoke(*self.elevate_command, "cp", str(binary), str(destination))
        logger.success("✓ Installed to {}", destination.as_posix())
        return destination


def install_tiers(config: BuildConfig) -> list[InstallTier]:
    """Destinations in priority order: user-local first, then system-wide."""
    return [
        UserLocalTier(config.user_bin_dir),
        SystemTier(config.system_bin_dir, config.elevate_command),
    ]


async def install(ctx: ActionContext) -> int:
    logger.info("Building release and installing...")
    # always rebuild so a stale binary is never installed
    binary = await build_target(ctx, RELEASE)

    for tier in install_tiers(ctx.config):
        if await tier.prepare():
            await tier.install(ctx, binary)
            return 0
        logger.debug("{} unavailable, trying next tier", tier.directory)

    raise InstallError("No usable installation directory")
