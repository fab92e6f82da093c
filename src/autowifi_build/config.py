from __future__ import annotations

import os
import shlex
import sys
from collections.abc import Mapping
from datetime import timedelta
from pathlib import Path
from typing import Final

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX: Final = "AUTOWIFI_BUILD_"
_SEQUENCE_FIELDS: Final = frozenset({"elevate_command", "required_env_keys"})


def _default_elevate_command() -> tuple[str, ...]:
    # Windows has no sudo; the system-wide tier is simply unavailable there.
    return () if sys.platform == "win32" else ("sudo",)


class BuildConfig(BaseModel):
    """Settings for one orchestrator invocation.

    Every field can be overridden with an ``AUTOWIFI_BUILD_<FIELD>``
    environment variable, see `from_env`.
    """

    model_config = ConfigDict(frozen=True)

    project_root: Path = Field(default_factory=Path.cwd)
    """Cargo project directory; delegated commands run here."""

    binary_name: str = "auto-wifi"
    cargo: str = "cargo"

    foreign_target: str = "x86_64-pc-windows-gnu"
    """Target triple used by the cross-compile command."""

    user_bin_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "bin")
    system_bin_dir: Path = Path("/usr/local/bin")

    elevate_command: tuple[str, ...] = Field(default_factory=_default_elevate_command)
    """
    Prefix used to copy into `system_bin_dir`.

    An empty prefix disables the system-wide install tier.
    """

    env_file: Path | None = Path(".env")
    """Credentials file the Cargo build script embeds, relative to `project_root`."""

    required_env_keys: tuple[str, ...] = (
        "ROUTER_IP",
        "ROUTER_PASSWORD",
        "PPPOE_CREDENTIALS",
    )

    timeout: timedelta | None = None
    """Upper bound for each delegated command. ``None`` waits forever."""

    log_level: str = "INFO"

    @field_validator("project_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        # delegated commands run with cwd=project_root, so paths under it
        # must not depend on our own working directory
        return value.resolve()

    @field_validator("env_file", mode="before")
    @classmethod
    def _empty_env_file(cls, value: object) -> object:
        if value == "":
            return None
        return value

    @field_validator("timeout", mode="before")
    @classmethod
    def _timeout_seconds(cls, value: object) -> object:
        if value == "":
            return None
        if isinstance(value, str | int | float):
            return timedelta(seconds=float(value))
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        # logger.level raises ValueError for names loguru does not know
        return logger.level(value.upper()).name

    @property
    def env_path(self) -> Path | None:
        if self.env_file is None:
            return None
        return self.project_root / self.env_file

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuildConfig:
        """Build a config from ``AUTOWIFI_BUILD_*`` variables.

        Sequence-valued settings are split shell-style, so
        ``AUTOWIFI_BUILD_ELEVATE_COMMAND="doas -n"`` becomes ``("doas", "-n")``.
        """
        environ = os.environ if environ is None else environ

        values: dict[str, object] = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            values[name] = tuple(shlex.split(raw)) if name in _SEQUENCE_FIELDS else raw

        return cls.model_validate(values)
