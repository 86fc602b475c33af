"""Interface for person stores (the remote-access adapter)."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType

    from rollcall.domain.person import Person


class PersonStore(abc.ABC):
    """Contract for a remote store of person records.

    Each method issues exactly one outbound call and translates its reply into
    a `Person` value or a `RemoteFailure`. Implementations do not retry.

    Unknown identifiers:
        `update` and `delete` targeting an identifier the store does not hold
        are a no-op rather than an error.
    """

    @abc.abstractmethod
    def list(self) -> list[Person]:
        """Read all people in the order returned by the store.

        Raises:
            RemoteFailure: If the read does not succeed.
        """

    @abc.abstractmethod
    def create(self, person: Person) -> Person:
        """Write a new person; the store assigns the identifier.

        Args:
            person: The person to create. Its `id`, if any, is not sent.

        Returns:
            The person as confirmed by the store, carrying the assigned `id`.

        Raises:
            RemoteFailure: If the write does not succeed.
        """

    @abc.abstractmethod
    def update(self, person: Person) -> None:
        """Overwrite the fields of the person stored under `person.id`.

        Raises:
            MissingIdentifierError: If `person.id` is None.
            RemoteFailure: If the write does not succeed.
        """

    @abc.abstractmethod
    def delete(self, person_id: str) -> None:
        """Remove the person stored under `person_id`.

        Raises:
            RemoteFailure: If the removal does not succeed.
        """

    def close(self) -> None:
        """Release resources held by the store (no-op by default)."""

    def __enter__(self) -> PersonStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
