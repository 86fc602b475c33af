"""Errors raised across the store boundary."""

from __future__ import annotations


class RemoteFailure(Exception):
    """Raised when a remote call did not complete with a success status.

    This is the only failure kind a `PersonStore` raises. Transport,
    database, and decoding problems are all reported through it; the
    underlying exception (if any) is chained as `__cause__`.

    Attributes:
        operation: The store verb that failed (`list`, `create`, `update`, `delete`).
        status: The unsuccessful HTTP status, or None when the failure has no
            status (transport or database errors).
        detail: Short human-readable description of the failure.
    """

    def __init__(
        self, operation: str, status: int | None = None, detail: str | None = None
    ) -> None:
        if detail is None:
            detail = "unexpected status" if status is not None else "remote call failed"
        status_part = f" (status {status})" if status is not None else ""
        super().__init__(f"{operation} failed{status_part}: {detail}")
        self.operation = operation
        self.status = status
        self.detail = detail
