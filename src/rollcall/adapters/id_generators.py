"""ID generators for stores that assign their own person keys."""

import threading
import uuid

from ulid import monotonic

from rollcall.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator (the default store key).

    ULIDs sort lexicographically in creation order, much like the push keys a
    keyed remote database hands out. Uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 keys; no ordering guarantee."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded keys ("1", "2", ... when `width` is 0).

    Note:
        Deterministic and handy in tests and demos; not for shared stores.
    """

    def __init__(self, width: int = 0, start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next = start
        self._width = width

    def new_id(self) -> str:
        """Return the next key in sequence."""
        with self._lock:
            value = self._next
            self._next += 1
        return f"{value:0{self._width}d}" if self._width else str(value)
