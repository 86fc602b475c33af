"""Build a store and its view-model from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rollcall import config
from rollcall.adapters.db.engine import make_engine
from rollcall.adapters.person_store.http import (
    DEFAULT_COLLECTION,
    HttpPersonStore,
    make_http_client,
)
from rollcall.adapters.person_store.sqlalchemy_store import SqlAlchemyPersonStore
from rollcall.viewmodels.person_list import PersonListViewModel

if TYPE_CHECKING:
    import httpx

    from rollcall.interfaces.person_store import PersonStore


@dataclass(frozen=True)
class AppContainer:
    """Application wiring handed to entry points."""

    store: PersonStore
    people: PersonListViewModel

    def close(self) -> None:
        """Dispose the view-model and release the store."""
        self.people.dispose()
        self.store.close()


def build_store(
    url: str,
    *,
    timeout: float | None = None,
    collection: str = DEFAULT_COLLECTION,
    transport: httpx.BaseTransport | None = None,
) -> PersonStore:
    """Build the person store addressed by `url`.

    Args:
        url: ``http(s)://`` API base URL or a SQLAlchemy database URL.
        timeout: HTTP request timeout in seconds (HTTP stores only).
        collection: People resource path segment (HTTP stores only).
        transport: Optional httpx transport (HTTP stores only; used by tests).

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` is neither HTTP nor a valid
            SQLAlchemy URL.
    """
    if config.is_http_url(url):
        client = make_http_client(url, timeout=timeout, transport=transport)
        return HttpPersonStore(client, collection=collection)

    return SqlAlchemyPersonStore(make_engine(url), dispose_on_close=True)


def bootstrap(
    url: str | None = None,
    *,
    timeout: float | None = None,
    collection: str = DEFAULT_COLLECTION,
) -> AppContainer:
    """Wire a store and a view-model; configuration fills unset arguments."""
    if url is None:
        url = config.get_store_url()
    if timeout is None:
        timeout = config.get_http_timeout()
    store = build_store(url, timeout=timeout, collection=collection)
    return AppContainer(store=store, people=PersonListViewModel(store))
