"""Fixtures for PersonStore contract tests."""

from collections.abc import Iterator

import pytest

from rollcall.adapters.id_generators import SimpleIdGenerator
from rollcall.adapters.person_store.memory import InMemoryPersonStore
from rollcall.adapters.person_store.sqlalchemy_store import SqlAlchemyPersonStore
from rollcall.interfaces.person_store import PersonStore


@pytest.fixture(params=["memory", "sqlite", "http"])
def person_store(request: pytest.FixtureRequest) -> Iterator[PersonStore]:
    """Return a fresh, empty PersonStore for the requested backend.

    Supported params:
      - `"memory"` → InMemoryPersonStore
      - `"sqlite"` → SqlAlchemyPersonStore on an in-memory SQLite database
      - `"http"`   → HttpPersonStore served by the in-process fake API

    Every backend assigns sequential ids ("1", "2", ...).
    """
    match request.param:
        case "memory":
            yield InMemoryPersonStore(SimpleIdGenerator())
        case "sqlite":
            engine = request.getfixturevalue("sqlite_engine_memory")
            yield SqlAlchemyPersonStore(engine, SimpleIdGenerator())
        case "http":
            yield request.getfixturevalue("http_store")
        case _:
            raise ValueError(f"unknown person store type: {request.param}")
