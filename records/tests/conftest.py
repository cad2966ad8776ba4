import pytest
from django.core.cache import cache

from records.services.repositories import InMemoryRepository
from records.services.store import RecordStore, clear_store


@pytest.fixture(autouse=True)
def _fresh_process_store():
    """Drop the shared store and throttle counters around every test."""
    clear_store()
    cache.clear()
    yield
    clear_store()


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def store(repository):
    return RecordStore(repository).initialize()
