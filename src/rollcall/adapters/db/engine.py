"""Database engine factory.

All engines used by ROLLCALL come from `make_engine()` so connections are
configured the same way everywhere. SQLite connections get PRAGMAs that
enforce foreign keys and favour concurrent readers; other backends are used
as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys=ON;",
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA temp_store=MEMORY;",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if `url` points at a SQLite database."""
    return make_url(str(url)).get_backend_name() == "sqlite"


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for `url`, applying SQLite PRAGMAs on connect.

    Args:
        url: Database URL (str or `URL`).
        echo: If True, log emitted SQL.

    Returns:
        A configured Engine.

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` cannot be parsed.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore # pylint: disable=unused-argument
            cur = dbapi_conn.cursor()
            for pragma in SQLITE_PRAGMAS:
                cur.execute(pragma)
            cur.close()

    return engine
