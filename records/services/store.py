"""
The in-memory record store.

A :class:`RecordStore` owns the six demo collections plus the billing
and dashboard singletons.  It is seeded from
:data:`records.defaults.INITIAL_DB`, overlaid with whatever the
repository returns, and written back in full after each mutation.
Storage failures are logged and absorbed here; they never reach the
caller.

Query and mutation functions take the store as their first argument
(see ``queries`` and ``appointments``).  HTTP views share one
process-wide store obtained through :func:`get_store`.
"""
from __future__ import annotations

import copy
import json
import logging
import threading
import time
from typing import Optional

from django.conf import settings

from records.defaults import INITIAL_DB
from records.services.repositories import SnapshotRepository, get_repository

logger = logging.getLogger(__name__)


def default_state() -> dict:
    return copy.deepcopy(INITIAL_DB)


class RecordStore:
    def __init__(self, repository: SnapshotRepository, *, simulate_latency: bool = False):
        self.repository = repository
        self.simulate_latency = simulate_latency
        # Re-entrant so a mutation can persist while holding it
        self.lock = threading.RLock()
        self.state: dict = default_state()

    def initialize(self) -> 'RecordStore':
        """Load the persisted snapshot and merge it over the defaults.

        The merge is shallow: a collection present in the snapshot
        replaces the default collection wholesale.  Unreadable or
        malformed data falls back to the defaults with a warning.
        """
        with self.lock:
            self.state = self._load()
        return self

    def _load(self) -> dict:
        try:
            raw = self.repository.load()
            if not raw:
                return default_state()
            parsed = json.loads(raw)
            if not isinstance(parsed, dict):
                raise ValueError(f'expected a JSON object, got {type(parsed).__name__}')
            return {**default_state(), **parsed}
        except Exception:
            logger.warning('Failed to load record store from %s, using defaults.',
                           type(self.repository).__name__, exc_info=True)
            return default_state()

    def persist(self) -> bool:
        """Write the whole store to the repository.

        Returns False when the write failed; the in-memory state stays
        authoritative either way.
        """
        with self.lock:
            try:
                self.repository.save(json.dumps(self.state, ensure_ascii=False))
            except Exception:
                logger.warning('Failed to save record store to %s.',
                               type(self.repository).__name__, exc_info=True)
                return False
        return True

    def reset(self) -> dict:
        """Discard runtime state, restore the defaults and persist them."""
        with self.lock:
            self.state = default_state()
            self.persist()
            logger.info('Record store reset to demo defaults')
            return copy.deepcopy(self.state)

    def records(self, name: str) -> list[dict]:
        """Copies of every record in collection ``name``, in insertion order."""
        with self.lock:
            return copy.deepcopy(self.state.get(name) or [])

    def singleton(self, name: str) -> dict:
        with self.lock:
            return copy.deepcopy(self.state.get(name) or {})

    def pause(self, ms: int) -> None:
        """Stand-in for network latency; a no-op unless enabled."""
        if self.simulate_latency and ms > 0:
            time.sleep(ms / 1000)


_store: Optional[RecordStore] = None
_store_lock = threading.Lock()


def get_store() -> RecordStore:
    """Return the process-wide store, creating and loading it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = RecordStore(
                get_repository(),
                simulate_latency=getattr(settings, 'RECORD_STORE_SIMULATE_LATENCY', False),
            ).initialize()
        return _store


def clear_store() -> None:
    """Forget the process-wide store; the next :func:`get_store` reloads it."""
    global _store
    with _store_lock:
        _store = None
