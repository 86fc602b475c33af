"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from rollcall.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from rollcall.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "uuid4", "simple", "simple-padded"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator for the requested backend."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case "simple":
            yield SimpleIdGenerator()
        case "simple-padded":
            yield SimpleIdGenerator(width=8)
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["ulid", "simple-padded"])
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Generators whose keys sort lexicographically in creation order."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "simple-padded":
            yield SimpleIdGenerator(width=8)
        case _:
            raise ValueError(f"unknown monotonic id generator type: {request.param}")
