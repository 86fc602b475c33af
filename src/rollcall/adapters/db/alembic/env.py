"""Alembic environment for ROLLCALL.

Policy defaults:
  - compare_type=True (catch column type drift)
  - render_as_batch=True on SQLite (ALTER TABLE emulation)
  - URL precedence: `-x url=...` > config sqlalchemy.url > ROLLCALL_STORE_URL
"""

import os

from alembic import context
from sqlalchemy import engine_from_config, pool

# imported for its side effect of registering tables on `metadata`
import rollcall.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from rollcall.adapters.db.metadata import metadata

# pylint: disable=no-member

config = context.config
target_metadata = metadata


def get_url() -> str:
    """Resolve DB URL with precedence: `-x url` > config > env."""
    xargs = context.get_x_argument(as_dictionary=True)
    url = xargs.get("url") or config.get_main_option("sqlalchemy.url")
    if not url:
        url = os.environ.get("ROLLCALL_STORE_URL")
    if not url:
        raise RuntimeError("Set ROLLCALL_STORE_URL to your database URL.")
    return url


def run_migrations_offline() -> None:
    """Emit migration SQL to the script output without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live connection."""
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
