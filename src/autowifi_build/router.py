from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Final, Self

from loguru import logger

from . import actions
from .actions import ActionContext, ActionProtocol
from .actions.help import PROG
from .exceptions import BuildError, DelegatedInvocationError, UnrecognizedCommandError


class Command(StrEnum):
    BUILD = "build"
    RELEASE = "release"
    WINDOWS = "windows"
    RUN = "run"
    RUN_RELEASE = "run-release"
    INSTALL = "install"
    CLEAN = "clean"
    CHECK = "check"
    TEST = "test"
    HELP = "help"

    @classmethod
    def parse(cls, name: str) -> Self:
        """Exact, case-sensitive lookup. ``Release`` is not ``release``."""
        if name in ALIASES:
            return cls(ALIASES[name])
        try:
            return cls(name)
        except ValueError:
            raise UnrecognizedCommandError(name) from None


DEFAULT_COMMAND: Final = Command.RUN
ALIASES: Final[dict[str, str]] = {
    "--help": Command.HELP,
    "-h": Command.HELP,
}

ACTIONS: Final[dict[Command, ActionProtocol]] = {
    Command.BUILD: actions.build,
    Command.RELEASE: actions.release,
    Command.WINDOWS: actions.windows,
    Command.RUN: actions.run,
    Command.RUN_RELEASE: actions.run_release,
    Command.INSTALL: actions.install,
    Command.CLEAN: actions.clean,
    Command.CHECK: actions.check,
    Command.TEST: actions.run_tests,
    Command.HELP: actions.show_help,
}


async def dispatch(args: Sequence[str], ctx: ActionContext) -> int:
    """
    Run the action named by the first argument and return the exit status.

    Only `args[0]` is looked at; when it is missing or empty the default
    command runs.
    A failed step aborts the action and its exit status is returned as is.
    """
    name = args[0] if args and args[0] else DEFAULT_COMMAND.value

    try:
        command = Command.parse(name)
    except UnrecognizedCommandError as e:
        logger.error("Unknown command: {}", e.name)
        logger.info("Run '{} help' for usage information", PROG)
        return e.exit_code

    logger.debug("Dispatching {}", command.value)
    try:
        return await ACTIONS[command](ctx)
    except DelegatedInvocationError as e:
        logger.error("{}", e)
        return e.exit_status
    except BuildError as e:
        logger.error("{}", e)
        return e.exit_code
