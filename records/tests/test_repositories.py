import pytest
from django.core.cache import cache
from django.test import override_settings

from records.models import StoreSnapshot
from records.services.repositories import (
    CacheRepository,
    DatabaseRepository,
    InMemoryRepository,
    get_repository,
)
from records.services.store import RecordStore, get_store


def test_in_memory_repository_round_trip():
    repo = InMemoryRepository()
    assert repo.load() is None
    repo.save('{"a": 1}')
    assert repo.load() == '{"a": 1}'
    assert repo.saves == 1


@pytest.mark.django_db
def test_database_repository_uses_single_row():
    repo = DatabaseRepository(key='test-slot')
    assert repo.load() is None
    repo.save('{"v": 1}')
    repo.save('{"v": 2}')
    assert repo.load() == '{"v": 2}'
    assert StoreSnapshot.objects.filter(key='test-slot').count() == 1


@pytest.mark.django_db
def test_store_survives_reload_through_database():
    store = RecordStore(DatabaseRepository(key='reload')).initialize()
    store.state['billing']['pendingClearance'] = 0
    store.persist()

    reloaded = RecordStore(DatabaseRepository(key='reload')).initialize()
    assert reloaded.state['billing']['pendingClearance'] == 0


def test_cache_repository_round_trip():
    repo = CacheRepository(key='cache-slot')
    assert repo.load() is None
    repo.save('{"v": 3}')
    assert repo.load() == '{"v": 3}'
    assert cache.get('cache-slot') == '{"v": 3}'


@override_settings(RECORD_STORE_KEY='configured-key')
def test_repository_key_defaults_to_setting():
    assert InMemoryRepository().key == 'configured-key'


@override_settings(RECORD_STORE_REPOSITORY='records.services.repositories.CacheRepository')
def test_get_repository_reads_setting():
    assert isinstance(get_repository(), CacheRepository)


@override_settings(RECORD_STORE_REPOSITORY='records.services.repositories.InMemoryRepository')
def test_get_store_is_shared_until_cleared():
    from records.services.store import clear_store

    first = get_store()
    assert get_store() is first
    clear_store()
    assert get_store() is not first
