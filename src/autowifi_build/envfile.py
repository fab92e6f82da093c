from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import anyio
from loguru import logger

from .config import BuildConfig
from .exceptions import EnvFileError


def parse_env(content: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines the way the Cargo build script reads them.

    Blank lines and ``#`` comments are skipped, keys and values are trimmed,
    and lines without ``=`` are ignored. Quotes are kept as part of the value.
    """
    values: dict[str, str] = {}
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep:
            values[key.strip()] = value.strip()
    return values


async def check_env_file(path: Path, required: Iterable[str]) -> dict[str, str]:
    env_file = anyio.Path(path)
    if not await env_file.is_file():
        msg = (
            f".env file not found: {path}\n"
            "Create it in the project root with your credentials, "
            "e.g. by copying .env.example to .env and filling in the values."
        )
        raise EnvFileError(msg)

    try:
        content = await env_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(f"Failed to read {path}: {e}") from e

    values = parse_env(content)
    if missing := [key for key in required if key not in values]:
        raise EnvFileError(f"Missing from {path}: {', '.join(missing)}")

    return values


async def preflight(config: BuildConfig) -> None:
    """Fail before compiling when the build script would reject the `.env` file."""
    if (path := config.env_path) is None:
        return
    await check_env_file(path, config.required_env_keys)
    logger.debug("Credentials file OK: {}", path)
