"""In-process fake of a JSON people API, served through `httpx.MockTransport`.

Routes (relative to `prefix`):

- ``GET    /people``       → 200, array of people (or an id-keyed object)
- ``POST   /people``       → 201, the created person with its new id
- ``PUT    /people/{id}``  → 200, or 404 if the id is unknown
- ``DELETE /people/{id}``  → 200, or 404 if the id is unknown

Data lives in an `InMemoryPersonStore` with sequential ids, so the first
person created gets id "1". Every request is recorded in `requests`, and
`fail_next()` queues canned error responses.
"""

from __future__ import annotations

import json
from collections import deque
from typing import Any
from urllib.parse import unquote

import httpx

from rollcall.adapters.id_generators import SimpleIdGenerator
from rollcall.adapters.person_store.memory import InMemoryPersonStore
from rollcall.domain.errors import InvalidPersonError
from rollcall.domain.person import Person


class FakePeopleApi:
    """Callable request handler for `httpx.MockTransport`.

    Args:
        prefix: Path prefix the API is mounted under.
        collection: Resource name of the people collection.
        keyed_listing: Answer GET with an id-keyed object instead of an array.
    """

    def __init__(
        self,
        prefix: str = "/api",
        collection: str = "people",
        keyed_listing: bool = False,
    ) -> None:
        self.base_path = f"{prefix.rstrip('/')}/{collection}"
        self.keyed_listing = keyed_listing
        self.store = InMemoryPersonStore(SimpleIdGenerator())
        self.requests: list[httpx.Request] = []
        self._queued_failures: deque[tuple[str | None, httpx.Response]] = deque()

    # --- test controls ---

    def seed(self, *people: Person) -> list[Person]:
        """Put people straight into the backing store."""
        return self.store.seed(*people)

    def fail_next(
        self, status: int, method: str | None = None, body: Any = None
    ) -> None:
        """Answer the next request (optionally only for `method`) with `status`."""
        response = httpx.Response(status, json=body if body is not None else {"error": "boom"})
        self._queued_failures.append((method, response))

    def calls(self, method: str) -> list[httpx.Request]:
        """Recorded requests made with `method`."""
        return [r for r in self.requests if r.method == method]

    # --- transport entry point ---

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self._queued_failures:
            method, response = self._queued_failures[0]
            if method is None or method == request.method:
                self._queued_failures.popleft()
                return response

        path = request.url.path
        if path == self.base_path:
            return self._collection(request)
        if path.startswith(self.base_path + "/"):
            person_id = unquote(path[len(self.base_path) + 1 :])
            return self._item(request, person_id)
        return httpx.Response(404, json={"error": "no such route"})

    # --- handlers ---

    def _collection(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            people = self.store.list()
            if self.keyed_listing:
                body: Any = {p.id: p.to_payload() for p in people} or None
            else:
                body = [{"id": p.id, **p.to_payload()} for p in people]
            return _json_response(200, body)
        if request.method == "POST":
            try:
                person = Person.from_payload(json.loads(request.content))
            except InvalidPersonError as e:
                return httpx.Response(422, json={"error": str(e)})
            created = self.store.create(person)
            return httpx.Response(201, json={"id": created.id, **created.to_payload()})
        return httpx.Response(405)

    def _item(self, request: httpx.Request, person_id: str) -> httpx.Response:
        if self.store.get(person_id) is None:
            return httpx.Response(404, json={"error": "not found"})
        if request.method == "PUT":
            try:
                person = Person.from_payload(json.loads(request.content), person_id)
            except InvalidPersonError as e:
                return httpx.Response(422, json={"error": str(e)})
            self.store.update(person)
            return httpx.Response(200, json={"id": person_id, **person.to_payload()})
        if request.method == "DELETE":
            self.store.delete(person_id)
            return httpx.Response(200, json=None)
        return httpx.Response(405)


def _json_response(status: int, body: Any) -> httpx.Response:
    # httpx sends no body at all for json=None; the keyed API answers a literal null
    return httpx.Response(
        status,
        content=json.dumps(body).encode(),
        headers={"Content-Type": "application/json"},
    )
