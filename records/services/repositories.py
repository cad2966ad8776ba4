"""
Storage backends for the serialized record store.

A repository holds exactly one opaque text value: the whole store as
JSON.  ``load`` returns that text (or ``None`` when nothing has been
saved yet) and ``save`` overwrites it.  Errors are allowed to propagate;
:class:`records.services.store.RecordStore` decides what to do with them.
"""
from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.core.cache import caches
from django.utils.module_loading import import_string


class SnapshotRepository:
    """Interface for the single key/value slot the store is saved into."""

    def __init__(self, key: Optional[str] = None):
        self.key = key or getattr(settings, 'RECORD_STORE_KEY', 'healthsight-db-v1')

    def load(self) -> Optional[str]:
        raise NotImplementedError

    def save(self, payload: str) -> None:
        raise NotImplementedError


class InMemoryRepository(SnapshotRepository):
    """Keeps the payload on the instance.  Nothing survives the process."""

    def __init__(self, key: Optional[str] = None, payload: Optional[str] = None):
        super().__init__(key)
        self.payload = payload
        self.saves = 0

    def load(self) -> Optional[str]:
        return self.payload

    def save(self, payload: str) -> None:
        self.payload = payload
        self.saves += 1


class DatabaseRepository(SnapshotRepository):
    """One row of :class:`records.models.StoreSnapshot`."""

    def load(self) -> Optional[str]:
        from records.models import StoreSnapshot

        return StoreSnapshot.objects.filter(key=self.key).values_list('payload', flat=True).first()

    def save(self, payload: str) -> None:
        from records.models import StoreSnapshot

        StoreSnapshot.objects.update_or_create(key=self.key, defaults={'payload': payload})


class CacheRepository(SnapshotRepository):
    """A Django cache entry with no expiry (locmem or Redis, see ``CACHES``)."""

    def __init__(self, key: Optional[str] = None, alias: str = 'default'):
        super().__init__(key)
        self.alias = alias

    def load(self) -> Optional[str]:
        return caches[self.alias].get(self.key)

    def save(self, payload: str) -> None:
        caches[self.alias].set(self.key, payload, None)


def get_repository() -> SnapshotRepository:
    """Instantiate the repository class named by ``RECORD_STORE_REPOSITORY``."""
    path = getattr(settings, 'RECORD_STORE_REPOSITORY', 'records.services.repositories.DatabaseRepository')
    return import_string(path)()
