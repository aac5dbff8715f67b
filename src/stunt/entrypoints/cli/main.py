"""STUNT CLI entry point.

Defines the top-level ``stunt`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``stunt inspect``: show the contract a double of a class would implement.

Notes
- The CLI version is sourced from `stunt.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``stunt.add_command(...)``.

Examples
    $ stunt --version
    $ stunt -v inspect myapp.gateways:EmailGateway
"""

import logging

import click
import click_extra as clickx

from stunt import __version__
from stunt.config import LOGGER_LEVELS_ENV_VAR
from stunt.logging import config_console_handler, log_startup

from .helpers.log_level_parser import parse_log_level
from .inspect_cmd import inspect_contract

logger = logging.getLogger(__name__)


HELP = """STUNT command-line interface.

    STUNT builds test doubles from capability contracts: abstract classes,
    protocols or explicit contract descriptions. These commands help you see
    what a double of a given class looks like before you use it in a test.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=LOGGER_LEVELS_ENV_VAR,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L stunt.engine=DEBUG -L asyncio=ERROR) or via "
        f"{LOGGER_LEVELS_ENV_VAR} (comma/space list)."
    ),
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def stunt(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """STUNT command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handler = config_console_handler(level=level, debug_mode=debug, color=use_color)

    # 2) configure root logger
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

    # 3) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger, app_version=__version__, level=level, logger_levels=logger_levels
    )

    ctx.call_on_close(logging.shutdown)


stunt.add_command(inspect_contract)
