"""The `Person` record and its wire (payload) codec.

Conventions:
  - `id` is assigned by the store on creation; it is `None` until then.
  - Identifiers are always strings. Numeric ids from JSON are normalised.
  - The write payload never carries the identifier; the request target or the
    store supplies it.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidPersonError

PAYLOAD_FIELDS = ("name", "age", "email")


@dataclass(frozen=True, slots=True)
class Person:
    """Immutable value object mirroring one row of remote data."""

    name: str
    age: int
    email: str | None = None
    id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidPersonError("name", "must be a non-blank string")
        # bool is an int subclass; reject it explicitly
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidPersonError("age", "must be an integer")
        if self.age < 0:
            raise InvalidPersonError("age", "must not be negative")
        if self.email is not None and not isinstance(self.email, str):
            raise InvalidPersonError("email", "must be a string if set")
        if self.id is not None:
            object.__setattr__(self, "id", _normalise_id(self.id))

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], person_id: str | int | None = None
    ) -> Person:
        """Decode a person from a wire/database payload.

        Args:
            payload: Mapping of field name to value. Unknown keys are ignored.
            person_id: Identifier to attach. Falls back to `payload["id"]`.

        Returns:
            The decoded `Person`.

        Raises:
            InvalidPersonError: If the payload is not a mapping, a required
                field is missing, or a field value is invalid.
        """
        if not isinstance(payload, Mapping):
            raise InvalidPersonError(
                "payload", f"expected an object, got {type(payload).__name__}"
            )
        for required in ("name", "age"):
            if required not in payload:
                raise InvalidPersonError(required, "missing from payload")

        if person_id is None:
            person_id = payload.get("id")

        return cls(
            id=person_id,  # type: ignore[arg-type] # normalised in __post_init__
            name=payload["name"],
            age=payload["age"],
            email=payload.get("email"),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object sent on create/update (identifier omitted)."""
        payload: dict[str, Any] = {"name": self.name, "age": self.age}
        if self.email is not None:
            payload["email"] = self.email
        return payload

    def with_id(self, person_id: str | int) -> Person:
        """Return a copy of this person carrying `person_id`."""
        return dataclasses.replace(self, id=_normalise_id(person_id))


def decode_people(payload: Any) -> list[Person]:
    """Decode a read payload into people, preserving the store's order.

    Two collection shapes are accepted:
      - a list of objects, each of which must carry its own `id`;
      - an object keyed by identifier (keyed-database style), where `None`
        stands for an empty collection.

    Raises:
        InvalidPersonError: If the payload has neither shape or an entry is invalid.
    """
    if payload is None:
        return []
    if isinstance(payload, list):
        return [_listed_person(item) for item in payload]
    if isinstance(payload, Mapping):
        return [
            Person.from_payload(item, person_id=key) for key, item in payload.items()
        ]
    raise InvalidPersonError(
        "payload", f"expected a list or object, got {type(payload).__name__}"
    )


def _listed_person(item: Any) -> Person:
    person = Person.from_payload(item)
    if person.id is None:
        raise InvalidPersonError("id", "missing from listed entry")
    return person


def _normalise_id(value: object) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidPersonError("id", "must be a string or integer")
    text = str(value)
    if not text:
        raise InvalidPersonError("id", "must not be empty")
    return text
