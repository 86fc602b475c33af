"""Concrete `PersonStore` adapters."""

from .http import HttpPersonStore, make_http_client
from .memory import InMemoryPersonStore
from .sqlalchemy_store import SqlAlchemyPersonStore

__all__ = [
    "HttpPersonStore",
    "InMemoryPersonStore",
    "SqlAlchemyPersonStore",
    "make_http_client",
]
