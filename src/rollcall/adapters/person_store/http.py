"""PersonStore backed by a JSON HTTP API (via httpx).

Status-code contract:

| verb   | request                       | success |
|--------|-------------------------------|---------|
| list   | ``GET /{collection}``         | 200     |
| create | ``POST /{collection}``        | 201     |
| update | ``PUT /{collection}/{id}``    | 200     |
| delete | ``DELETE /{collection}/{id}`` | 200     |

Any other status is reported as a `RemoteFailure`, except a 404 on update or
delete, which is treated as "already gone" and ignored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from rollcall.domain.errors import InvalidPersonError, MissingIdentifierError
from rollcall.domain.person import Person, decode_people
from rollcall.interfaces.errors import RemoteFailure
from rollcall.interfaces.person_store import PersonStore

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "people"

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NOT_FOUND = 404


def make_http_client(
    base_url: str, *, timeout: float | None = None, **kwargs: Any
) -> httpx.Client:
    """Build the httpx client injected into `HttpPersonStore`.

    Args:
        base_url: API root, e.g. ``https://api.example.com/v1``.
        timeout: Seconds to wait on each request; None (default) waits forever.
        **kwargs: Passed through to `httpx.Client` (e.g. ``transport=`` in tests).
    """
    return httpx.Client(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
        **kwargs,
    )


class HttpPersonStore(PersonStore):
    """Person store that issues one HTTP request per CRUD verb.

    Args:
        client: A configured `httpx.Client`; its `base_url` locates the API.
        collection: Path segment of the people resource.
    """

    def __init__(self, client: httpx.Client, collection: str = DEFAULT_COLLECTION):
        self.client = client
        self.collection = collection.strip("/")

    # --- verbs ---

    def list(self) -> list[Person]:
        response = self._send("list", "GET", self._collection_path())
        self._expect("list", response, HTTP_OK)
        payload = self._json("list", response)
        try:
            return decode_people(payload)
        except InvalidPersonError as e:
            raise RemoteFailure("list", response.status_code, str(e)) from e

    def create(self, person: Person) -> Person:
        payload = person.to_payload()
        response = self._send("create", "POST", self._collection_path(), json=payload)
        self._expect("create", response, HTTP_CREATED)
        body = self._json("create", response)
        if not isinstance(body, dict):
            raise RemoteFailure(
                "create", response.status_code, "response body is not an object"
            )
        try:
            confirmed = Person.from_payload({**payload, **body})
        except InvalidPersonError as e:
            raise RemoteFailure("create", response.status_code, str(e)) from e
        if confirmed.id is None:
            raise RemoteFailure(
                "create", response.status_code, "store did not assign an identifier"
            )
        return confirmed

    def update(self, person: Person) -> None:
        if person.id is None:
            raise MissingIdentifierError("update")
        response = self._send(
            "update", "PUT", self._item_path(person.id), json=person.to_payload()
        )
        if response.status_code == HTTP_NOT_FOUND:
            logger.warning("update %s: not found on server; noop", person.id)
            return
        self._expect("update", response, HTTP_OK)

    def delete(self, person_id: str) -> None:
        response = self._send("delete", "DELETE", self._item_path(person_id))
        if response.status_code == HTTP_NOT_FOUND:
            logger.debug("delete %s: not found on server; noop", person_id)
            return
        self._expect("delete", response, HTTP_OK)

    def close(self) -> None:
        self.client.close()

    # --- helpers ---

    def _collection_path(self) -> str:
        return f"/{self.collection}"

    def _item_path(self, person_id: str) -> str:
        return f"/{self.collection}/{quote(person_id, safe='')}"

    def _send(self, operation: str, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug("%s: %s %s", operation, method, url)
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise RemoteFailure(operation, None, str(e) or type(e).__name__) from e
        logger.debug("%s: -> %s", operation, response.status_code)
        return response

    @staticmethod
    def _expect(
        operation: str, response: httpx.Response, expected: int | Iterable[int]
    ) -> None:
        allowed = {expected} if isinstance(expected, int) else set(expected)
        if response.status_code not in allowed:
            raise RemoteFailure(
                operation,
                response.status_code,
                response.reason_phrase or "unexpected status",
            )

    @staticmethod
    def _json(operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteFailure(
                operation, response.status_code, "response body is not valid JSON"
            ) from e
