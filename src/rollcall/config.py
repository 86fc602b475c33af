"""Configuration utilities for ROLLCALL.

Settings come from the environment:

- ``ROLLCALL_STORE_URL``: where people live. An ``http(s)://`` base URL selects
  the HTTP store; any other SQLAlchemy URL selects the database store.
- ``ROLLCALL_HTTP_TIMEOUT``: optional per-request timeout in seconds for the
  HTTP store. Unset means wait indefinitely.
"""

import os
import sys
from pathlib import Path
from typing import TextIO

from alembic.config import Config
from sqlalchemy.engine import make_url

STORE_URL_ENVVAR = "ROLLCALL_STORE_URL"  # pragma: no mutate
HTTP_TIMEOUT_ENVVAR = "ROLLCALL_HTTP_TIMEOUT"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION = Path(__file__).resolve().parent / "adapters" / "db" / "alembic"

HTTP_SCHEMES = ("http", "https")


class StoreUrlNotSetError(Exception):
    """Raised when the ROLLCALL_STORE_URL environment variable is not set."""


class InvalidTimeoutError(ValueError):
    """Raised when ROLLCALL_HTTP_TIMEOUT is not a positive number."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"{HTTP_TIMEOUT_ENVVAR} must be a positive number of seconds, got {raw!r}"
        )
        self.raw = raw


def get_store_url() -> str:
    """Get the store URL from the environment.

    Returns:
        The value of the `ROLLCALL_STORE_URL` environment variable.

    Raises:
        StoreUrlNotSetError: If `ROLLCALL_STORE_URL` is not set.
    """
    if not (url := os.environ.get(STORE_URL_ENVVAR)):
        raise StoreUrlNotSetError
    return url


def get_http_timeout() -> float | None:
    """Get the HTTP timeout (seconds) from the environment, or None if unset.

    Raises:
        InvalidTimeoutError: If the value is not a positive number.
    """
    if not (raw := os.environ.get(HTTP_TIMEOUT_ENVVAR)):
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise InvalidTimeoutError(raw) from e
    if timeout <= 0:
        raise InvalidTimeoutError(raw)
    return timeout


def is_http_url(url: str) -> bool:
    """Return True if `url` addresses an HTTP API rather than a database."""
    scheme, sep, _ = url.partition("://")
    return bool(sep) and scheme.lower() in HTTP_SCHEMES


def store_kind(url: str) -> str:
    """Short backend name for `url`: ``http``, or the SQL dialect (``sqlite``, ...).

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` is not HTTP and not a SQLAlchemy URL.
    """
    if is_http_url(url):
        return "http"
    return make_url(url).get_backend_name()


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` for ROLLCALL's migrations (no ini file).

    Args:
        db_url: SQLAlchemy database URL. May be `None` only where Alembic
            won't need to connect (e.g. listing heads).
        stdout: Stream Alembic writes status lines to; override in tests.

    Returns:
        An `alembic.config.Config` pointing at the packaged migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(ALEMBIC_SCRIPT_LOCATION))
    return cfg
