"""In-memory PersonStore implementation.

Behaves like a keyed remote collection: `create` assigns a fresh key, `update`
overwrites a key's fields, and `delete` removes a key. Useful for tests and as
the backing data of fake HTTP services.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rollcall.adapters.id_generators import ULIDGenerator
from rollcall.domain.errors import MissingIdentifierError
from rollcall.domain.person import Person
from rollcall.interfaces.person_store import PersonStore

if TYPE_CHECKING:
    from rollcall.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class InMemoryPersonStore(PersonStore):
    """Insertion-ordered, non-durable person store."""

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        self._id_generator = id_generator or ULIDGenerator()
        self._rows: dict[str, dict[str, Any]] = {}

    def list(self) -> list[Person]:
        return [
            Person.from_payload(row, person_id=key) for key, row in self._rows.items()
        ]

    def create(self, person: Person) -> Person:
        key = self._new_key()
        self._rows[key] = person.to_payload()
        return person.with_id(key)

    def update(self, person: Person) -> None:
        if person.id is None:
            raise MissingIdentifierError("update")
        if person.id not in self._rows:
            logger.debug("update %s: unknown id; noop", person.id)
            return
        self._rows[person.id] = person.to_payload()

    def delete(self, person_id: str) -> None:
        if self._rows.pop(person_id, None) is None:
            logger.debug("delete %s: unknown id; noop", person_id)

    def _new_key(self) -> str:
        # seeded rows may already hold keys the generator has not handed out yet
        key = self._id_generator.new_id()
        while key in self._rows:
            key = self._id_generator.new_id()
        return key

    # --- test/demo helpers ---

    def seed(self, *people: Person) -> list[Person]:
        """Insert people directly, keeping any ids they already carry."""
        seeded = []
        for person in people:
            key = person.id or self._new_key()
            self._rows[key] = person.to_payload()
            seeded.append(person.with_id(key))
        return seeded

    def get(self, person_id: str) -> Person | None:
        """Return the stored person for `person_id`, or None."""
        if (row := self._rows.get(person_id)) is None:
            return None
        return Person.from_payload(row, person_id=person_id)
