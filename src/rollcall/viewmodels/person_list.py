"""View-model holding the cached list of people."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from rollcall.domain.errors import MissingIdentifierError
from rollcall.interfaces.errors import RemoteFailure

if TYPE_CHECKING:
    from rollcall.domain.person import Person
    from rollcall.interfaces.person_store import PersonStore

logger = logging.getLogger(__name__)

Listener: TypeAlias = Callable[[], None]


class PersonListViewModel:
    """Cache of the store's people with synchronous change notification.

    The view-model is the single writer of its cached list. Every successful
    mutation (and both edges of a refresh) fans out to the registered
    listeners, in registration order.

    Failure policy:
        - `refresh()` never raises a `RemoteFailure`: it logs it, records it
          in `last_error`, and keeps the previously cached list.
        - `add()`, `modify()` and `remove()` let the failure propagate and do
          not notify.

    Args:
        store: The store this view-model reads from and writes to.
    """

    def __init__(self, store: PersonStore) -> None:
        self.store = store
        self._people: list[Person] = []
        self._listeners: list[Listener] = []
        self._is_loading = False
        self._last_error: RemoteFailure | None = None
        self._disposed = False

    # --- observable state ---

    @property
    def people(self) -> tuple[Person, ...]:
        """Read-only snapshot of the cached people, in store order."""
        return tuple(self._people)

    @property
    def is_loading(self) -> bool:
        """True while `refresh()` waits on the store."""
        return self._is_loading

    @property
    def last_error(self) -> RemoteFailure | None:
        """Failure of the most recent refresh, or None if it succeeded."""
        return self._last_error

    def find(self, person_id: str) -> Person | None:
        """Return the cached person with `person_id`, or None."""
        for person in self._people:
            if person.id == person_id:
                return person
        return None

    # --- subscriptions ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener` and return a callable that unregisters it."""
        self._check_alive()
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:  # pylint: disable=broad-except
                logger.exception("Listener %r raised during notification", listener)
                raise

    # --- operations ---

    def refresh(self) -> None:
        """Reload the cache from the store, flagging `is_loading` meanwhile."""
        self._check_alive()
        self._is_loading = True
        try:
            self._notify()
            self._load()
        finally:
            self._is_loading = False
        self._notify()

    def _load(self) -> None:
        try:
            people = self.store.list()
        except RemoteFailure as e:
            logger.error("Refreshing people failed: %s", e)
            self._last_error = e
        else:
            logger.debug("Refreshed %d people", len(people))
            self._people = list(people)
            self._last_error = None

    def add(self, person: Person) -> Person:
        """Create `person` in the store and append the confirmed record.

        Returns:
            The person as confirmed by the store (with its assigned id).

        Raises:
            RemoteFailure: If the store rejects the create.
        """
        self._check_alive()
        created = self.store.create(person)
        self._people.append(created)
        logger.debug("Added person %s", created.id)
        self._notify()
        return created

    def modify(self, person: Person) -> None:
        """Write `person` to the store and replace the cached entry with its id.

        Listeners are notified even when no cached entry matches.

        Raises:
            MissingIdentifierError: If `person.id` is None.
            RemoteFailure: If the store rejects the update.
        """
        self._check_alive()
        if person.id is None:
            raise MissingIdentifierError("modify")
        self.store.update(person)
        self._people = [
            person if cached.id == person.id else cached for cached in self._people
        ]
        logger.debug("Modified person %s", person.id)
        self._notify()

    def remove(self, person_id: str) -> None:
        """Delete `person_id` from the store and drop it from the cache.

        Removing an id that is not cached leaves the list unchanged.

        Raises:
            RemoteFailure: If the store rejects the delete.
        """
        self._check_alive()
        self.store.delete(person_id)
        self._people = [cached for cached in self._people if cached.id != person_id]
        logger.debug("Removed person %s", person_id)
        self._notify()

    # --- lifecycle ---

    def dispose(self) -> None:
        """Drop all listeners and the cache; the view-model is unusable afterwards."""
        self._listeners.clear()
        self._people.clear()
        self._disposed = True

    def _check_alive(self) -> None:
        if self._disposed:
            raise RuntimeError("PersonListViewModel used after dispose()")
