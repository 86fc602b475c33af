"""Interfaces (application boundary) for ROLLCALL.

Defines the contracts shared by the view-models and the adapters: the
`PersonStore` adapter ABC, the `RemoteFailure` error every adapter raises, and
the `IdGenerator` used by stores that assign their own keys.

Dependency rule: this package may import `rollcall.domain` only. It may be
imported by `rollcall.viewmodels`, `rollcall.adapters`, and `rollcall.bootstrap`.
"""

from .errors import RemoteFailure
from .id_generator import IdGenerator
from .person_store import PersonStore

__all__ = ["IdGenerator", "PersonStore", "RemoteFailure"]
