"""Domain layer for ROLLCALL.

Holds the `Person` record and domain errors. Pure Python: this package must
not import from any other `rollcall.*` package.
"""

from .errors import DomainError, InvalidPersonError, MissingIdentifierError
from .person import Person, decode_people

__all__ = [
    "DomainError",
    "InvalidPersonError",
    "MissingIdentifierError",
    "Person",
    "decode_people",
]
