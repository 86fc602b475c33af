"""PersonStore backed by a SQL database (SQLAlchemy Core).

Each verb runs in its own short transaction on a fresh connection. The store
assigns identifiers itself (via an `IdGenerator`), so `create` behaves like a
push to a keyed remote collection.
"""

from __future__ import annotations

import datetime
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from rollcall.adapters.db.schema import people
from rollcall.adapters.id_generators import ULIDGenerator
from rollcall.domain.errors import InvalidPersonError, MissingIdentifierError
from rollcall.domain.person import Person
from rollcall.interfaces.errors import RemoteFailure
from rollcall.interfaces.person_store import PersonStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Connection, Engine

    from rollcall.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class SqlAlchemyPersonStore(PersonStore):
    """Person store over the `people` table.

    Args:
        engine: Engine bound to a database migrated to head.
        id_generator: Source of new person ids (ULIDs by default).
        dispose_on_close: Dispose the engine when the store is closed.
    """

    def __init__(
        self,
        engine: Engine,
        id_generator: IdGenerator | None = None,
        *,
        dispose_on_close: bool = False,
    ) -> None:
        self.engine = engine
        self._id_generator = id_generator or ULIDGenerator()
        self._dispose_on_close = dispose_on_close

    def list(self) -> list[Person]:
        stmt = select(
            people.c.person_id, people.c.name, people.c.age, people.c.email
        ).order_by(people.c.seq)
        with self._transaction("list") as conn:
            rows = conn.execute(stmt).mappings().all()
        try:
            return [Person.from_payload(row, person_id=row["person_id"]) for row in rows]
        except InvalidPersonError as e:
            raise RemoteFailure("list", None, str(e)) from e

    def create(self, person: Person) -> Person:
        person_id = self._id_generator.new_id()
        stmt = insert(people).values(
            person_id=person_id,
            recorded_at=datetime.datetime.now(datetime.timezone.utc),
            **person.to_payload(),
        )
        with self._transaction("create") as conn:
            conn.execute(stmt)
        return person.with_id(person_id)

    def update(self, person: Person) -> None:
        if person.id is None:
            raise MissingIdentifierError("update")
        stmt = (
            update(people)
            .where(people.c.person_id == person.id)
            .values(name=person.name, age=person.age, email=person.email)
        )
        with self._transaction("update") as conn:
            result = conn.execute(stmt)
        if result.rowcount == 0:
            logger.debug("update %s: unknown id; noop", person.id)

    def delete(self, person_id: str) -> None:
        stmt = delete(people).where(people.c.person_id == person_id)
        with self._transaction("delete") as conn:
            result = conn.execute(stmt)
        if result.rowcount == 0:
            logger.debug("delete %s: unknown id; noop", person_id)

    def close(self) -> None:
        if self._dispose_on_close:
            self.engine.dispose()

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Connection]:
        """Yield a connection inside a transaction, mapping DB errors to RemoteFailure."""
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            raise RemoteFailure(operation, None, str(getattr(e, "orig", None) or e)) from e
