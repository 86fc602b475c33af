"""View-models for ROLLCALL.

A view-model owns the in-memory state a view renders and exposes the store's
operations wrapped with change notification. Views subscribe with plain
callbacks; there is no base "notifier" class to inherit from.

Dependency rule: may import `rollcall.domain` and `rollcall.interfaces` only.
Concrete stores are injected by `rollcall.bootstrap`.
"""

from .person_list import Listener, PersonListViewModel

__all__ = ["Listener", "PersonListViewModel"]
