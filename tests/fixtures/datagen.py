"""Fixtures for generating test data."""

from collections.abc import Callable
from typing import Any

import pytest

from rollcall.domain.person import Person


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Factory for valid people with sensible defaults.

    Defaults: name="Test Person", age=30, email=None, id=None. Any field can be
    overridden by keyword, e.g. ``make_person(name="Jane", id="2")``.
    """

    def _make_person(**overrides: Any) -> Person:
        fields: dict[str, Any] = {
            "name": "Test Person",
            "age": 30,
            "email": None,
            "id": None,
        }
        fields.update(overrides)
        return Person(**fields)

    return _make_person


@pytest.fixture
def john_and_jane() -> list[Person]:
    """The two-person roll used throughout the scenarios (ids "1" and "2")."""
    return [
        Person(id="1", name="John", age=25),
        Person(id="2", name="Jane", age=30),
    ]
