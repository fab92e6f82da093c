from __future__ import annotations

from .abc import ActionContext, ActionProtocol
from .build import build, build_target, release, windows
from .help import render_help, show_help
from .install import InstallTier, SystemTier, UserLocalTier, install, install_tiers
from .maintenance import check, clean
from .maintenance import test as run_tests
from .run import run, run_release

__all__ = [
    "ActionContext",
    "ActionProtocol",
    "InstallTier",
    "SystemTier",
    "UserLocalTier",
    "build",
    "build_target",
    "check",
    "clean",
    "install",
    "install_tiers",
    "release",
    "render_help",
    "run",
    "run_release",
    "run_tests",
    "show_help",
    "windows",
]
