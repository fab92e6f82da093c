from __future__ import annotations

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """
    Configures loguru for the autowifi_build command line.

    Status lines are printed bare and coloured by level (success in green,
    warnings in yellow, errors in red). At DEBUG a timestamp and level column
    are added, and every delegated command line is logged before it runs.
    """
    logger.remove()

    if level.upper() == "DEBUG":
        fmt = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        )
    else:
        fmt = "<level>{message}</level>"

    logger.add(sys.stderr, format=fmt, level=level.upper())
    logger.enable("autowifi_build")
