"""Global pytest fixtures for ROLLCALL."""

from __future__ import annotations

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.http",
    "tests.fixtures.datagen",
]


@pytest.fixture(autouse=True)
def _isolate_store_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ROLLCALL_* environment out of the tests."""
    for name in (
        "ROLLCALL_STORE_URL",
        "ROLLCALL_HTTP_TIMEOUT",
        "ROLLCALL_LOGGER_LEVELS",
        "ROLLCALL_LOG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
