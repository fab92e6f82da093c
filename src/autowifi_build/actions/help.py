from __future__ import annotations

from typing import Final

from jinja2 import Environment, PackageLoader

from .abc import ActionContext

PROG: Final = "autowifi-build"
HELP_TEMPLATE_FILE: Final = "help.txt.j2"

COMMANDS: Final[tuple[tuple[str, str], ...]] = (
    ("build", "Build in debug mode"),
    ("release", "Build in release mode (optimized)"),
    ("windows", "Build for Windows (cross-compile)"),
    ("run", "Run in debug mode (default)"),
    ("run-release", "Run optimized release build"),
    ("install", "Build release and install to system"),
    ("clean", "Clean build artifacts"),
    ("check", "Check code for errors"),
    ("test", "Run tests"),
    ("help", "Show this help message"),
)
EXAMPLES: Final[tuple[tuple[str, str], ...]] = (
    ("", "Run in debug mode"),
    ("release", "Build optimized binary"),
    ("windows", "Build for Windows"),
    ("install", "Install system-wide"),
)
FEATURES: Final[tuple[str, ...]] = (
    "Automatic ChromeDriver management",
    "Cross-platform desktop notifications",
    "Automated PPPoE ID switching",
)

_env: Final = Environment(
    loader=PackageLoader("autowifi_build.actions", "templates"),
    autoescape=False,
    trim_blocks=True,
    keep_trailing_newline=True,
)
_help_template: Final = _env.get_template(HELP_TEMPLATE_FILE)


def render_help() -> str:
    return _help_template.render(
        prog=PROG,
        commands=COMMANDS,
        examples=EXAMPLES,
        features=FEATURES,
        intro_width=len(PROG) + len(" run-release") + 2,
    )


async def show_help(ctx: ActionContext) -> int:
    print(render_help(), end="")
    return 0
