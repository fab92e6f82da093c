from __future__ import annotations

from loguru import logger

from .actions import ActionContext
from .config import BuildConfig
from .router import Command, dispatch
from .target import BuildTarget

logger.disable("autowifi_build")

__all__ = [
    "ActionContext",
    "BuildConfig",
    "BuildTarget",
    "Command",
    "dispatch",
]
