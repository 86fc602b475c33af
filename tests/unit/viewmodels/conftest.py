"""Fixtures for view-model tests."""

import pytest

from rollcall.viewmodels.person_list import PersonListViewModel

from .fakes import FakePersonStore


@pytest.fixture
def store() -> FakePersonStore:
    return FakePersonStore()


@pytest.fixture
def vm(store) -> PersonListViewModel:
    view_model = PersonListViewModel(store)
    yield view_model
    view_model.dispose()


@pytest.fixture
def seeded(store, john_and_jane):
    """Store holding John (id "1") and Jane (id "2")."""
    store.seed(*john_and_jane)
    return john_and_jane


@pytest.fixture
def notifications(vm) -> list[int]:
    """Records one entry per notification, with the cache size at that time."""
    seen: list[int] = []
    vm.subscribe(lambda: seen.append(len(vm.people)))
    return seen
