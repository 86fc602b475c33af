"""Logging setup for the ROLLCALL CLI.

`configure_logging` installs two handlers on the root logger:

- a Rich console handler on stderr, at WARNING unless `-v`/`-q` move it;
- a `FlightRecorder`, which buffers DEBUG records in memory and writes them
  to a file once a WARNING arrives (or on exit when force-flushed).

Records from other libraries are tagged ``[httpx]``, ``[sqlalchemy]`` and so
on, so a store's own chatter stands apart from rollcall's.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "rollcall"

# distributions whose versions matter when a store misbehaves
DIAGNOSED_DISTRIBUTIONS = ("httpx", "SQLAlchemy", "alembic", "click-extra", "rich")

FLIGHT_RECORD_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices gathered from the command line.

    Attributes:
        verbosity: Number of ``-v`` minus number of ``-q``.
        debug: Timestamps, logger names and source paths on the console.
        log_path: Flight-recorder file; None turns the recorder off.
        recorder_capacity: Records the flight recorder keeps in memory.
        force_flush: Write the recorder buffer on exit even without a WARNING.
        logger_levels: Minimum level per logger name.
    """

    verbosity: int = 0
    debug: bool = False
    log_path: Path | None = None
    recorder_capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING shifted one level per step of verbosity, clamped to DEBUG..CRITICAL."""
        if self.debug:
            return logging.DEBUG
        level = logging.WARNING - 10 * self.verbosity
        return max(logging.DEBUG, min(logging.CRITICAL, level))


class LibraryPrefixFormatter(logging.Formatter):
    """Prefix messages from non-rollcall loggers with ``[top-level-name]``."""

    # RichHandler calls formatMessage directly when it renders a traceback
    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        if record.name.split(".")[0] == PROJECT_PREFIX:
            return message
        return f"[{record.name.split('.')[0]}] {message}"


class FlightRecorder(MemoryHandler):
    """Memory buffer of recent records that dumps to `path` on WARNING.

    The file is truncated on the first flush of each run and only created
    once something is written.
    """

    def __init__(
        self,
        path: Path,
        capacity: int = 2000,
        *,
        flush_level: int = logging.WARNING,
        flush_on_close: bool = False,
    ) -> None:
        target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
        target.setLevel(logging.DEBUG)
        target.setFormatter(logging.Formatter(FLIGHT_RECORD_FORMAT))
        super().__init__(
            capacity=capacity,
            flushLevel=flush_level,
            target=target,
            flushOnClose=flush_on_close,
        )
        self.path = path

    def close(self) -> None:
        target = self.target
        try:
            super().close()
        finally:
            if target is not None:
                target.close()

    def describe(self) -> str:
        return (
            f"path={self.path}, capacity={self.capacity}, "
            f"flush_on_close={self.flushOnClose}"
        )


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown.
        debug_mode: Show timestamps, logger names and clickable source paths.
        color: Follow click-extra's ``--color/--no-color``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(LibraryPrefixFormatter("%(message)s"))
    return handler


def configure_logging(
    settings: LoggingSettings, *, color: bool = True
) -> list[Handler]:
    """Replace the root logger's handlers according to `settings`.

    The root logger passes everything; each handler applies its own level,
    and `settings.logger_levels` set the floor per logger.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.console_level, debug_mode=settings.debug, color=color
        )
    ]
    if settings.log_path is not None:
        handlers.append(
            FlightRecorder(
                settings.log_path,
                settings.recorder_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in settings.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line summary at INFO and environment details at DEBUG."""
    recorders = [h for h in handlers if isinstance(h, FlightRecorder)]
    logger.info(
        "ROLLCALL %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if recorders else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for name in DIAGNOSED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, _distribution_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    for recorder in recorders:
        logger.debug("Flight recorder: %s", recorder.describe())
    overrides = {
        name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")


def log_store(
    logger: Logger,
    *,
    kind: str,
    url: str,
    timeout: float | None = None,
    collection: str | None = None,
) -> None:
    """Log which store a command talks to.

    Args:
        kind: ``http`` or the SQL backend name (``sqlite``, ``postgresql``, ...).
        url: Store URL, already sanitised for display.
        timeout: HTTP request timeout in seconds, if any.
        collection: People resource path on HTTP stores.
    """
    logger.info("Using %s store at %s", kind, url)
    if kind == "http":
        logger.debug(
            "HTTP store: collection=%s, timeout=%s",
            collection,
            f"{timeout}s" if timeout is not None else "none",
        )
