from __future__ import annotations

import sys
from typing import Annotated

from cyclopts import App, Parameter
from pydantic import ValidationError

from autowifi_build.actions import ActionContext
from autowifi_build.actions.help import PROG
from autowifi_build.config import ENV_PREFIX, BuildConfig
from autowifi_build.logging import setup_logging
from autowifi_build.router import dispatch
from autowifi_build.utils.process import SubprocessRunner

# Help is an ordinary command of the router, so cyclopts' own flags are off
# and `--help`/`-h` reach `dispatch` as plain tokens.
app = App(name=PROG, help_flags=[], version_flags=[])


def _load_config() -> BuildConfig:
    try:
        return BuildConfig.from_env()
    except ValidationError as e:
        details = "; ".join(
            f"{ENV_PREFIX}{'.'.join(map(str, err['loc'])).upper()}: {err['msg']}"
            for err in e.errors()
        )
        raise SystemExit(f"Invalid configuration: {details}") from None


@app.default
async def launch(
    *args: Annotated[str, Parameter(allow_leading_hyphen=True)],
) -> int:
    """Build and run helper for the auto-wifi manager."""

    config = _load_config()
    setup_logging(config.log_level)
    ctx = ActionContext(config=config, runner=SubprocessRunner(timeout=config.timeout))
    return await dispatch(args, ctx)


def main() -> None:
    sys.exit(app())
