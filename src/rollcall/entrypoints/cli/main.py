"""ROLLCALL CLI entry point.

Defines the top-level ``rollcall`` command (via Click-Extra): console
verbosity, the flight recorder, and per-logger levels. Subcommands:

- ``rollcall people``: list/add/update/remove people in the configured store.
- ``rollcall db``:     forward-only schema management for database stores.

Examples
    $ rollcall --version
    $ ROLLCALL_STORE_URL=https://api.example.com rollcall people list
    $ ROLLCALL_STORE_URL=sqlite:///people.db rollcall db upgrade
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from rollcall import __version__
from rollcall.logging import LoggingSettings, configure_logging, log_startup

from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import DEFAULT_LIB_LEVELS, parse_log_level
from .people import people as people_group

logger = logging.getLogger(__name__)


HELP = """ROLLCALL command-line interface.

    ROLLCALL keeps a roll of people in a remote store (a JSON HTTP API or a SQL
    database) and lets you list, add, update, and remove them. Point it at a
    store with ROLLCALL_STORE_URL.
    """

DOCS_URL = "https://rollcall.readthedocs.io/"
ISSUES_URL = "https://github.com/rollcall/rollcall/issues"

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink(DOCS_URL),
        "  Issues: " + hyperlink(ISSUES_URL),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise the default WARNING console verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower the default WARNING console verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight-recorder log file.",
    default=Path(user_log_dir("rollcall", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ROLLCALL_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="ROLLCALL_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "with --force-flush."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Always write the flight-recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the MINIMUM LEVEL of specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L httpx=INFO) or via "
        "ROLLCALL_LOGGER_LEVELS (comma/space list)."
    ),
    default=tuple(
        f"{name}={logging.getLevelName(lvl)}"
        for name, lvl in DEFAULT_LIB_LEVELS.items()
    ),
    envvar="ROLLCALL_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def rollcall(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROLLCALL command-line interface."""
    settings = LoggingSettings(
        verbosity=verbose_count - quiet_count,
        debug=debug,
        log_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings, color=ctx.color is not False)
    log_startup(logger, settings, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


rollcall.add_command(people_group)
rollcall.add_command(db_group)
