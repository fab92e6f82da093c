from __future__ import annotations

from .process import Runner, SubprocessRunner

__all__ = ["Runner", "SubprocessRunner"]
