"""
Record store lifecycle: loading, merging, persisting and resetting.
"""
import json
import logging

from records.defaults import INITIAL_DB
from records.services.ids import generate_id, to_base36
from records.services.repositories import InMemoryRepository
from records.services.store import RecordStore


class BrokenRepository(InMemoryRepository):
    def load(self):
        raise OSError("disk unavailable")

    def save(self, payload):
        raise OSError("disk full")


def test_initialize_without_snapshot_uses_defaults(store):
    assert store.state == INITIAL_DB
    assert store.state is not INITIAL_DB
    assert store.state['doctors'] is not INITIAL_DB['doctors']


def test_snapshot_is_merged_shallowly_over_defaults():
    persisted = {
        'doctors': [{'id': 'DOC-900', 'name': 'Dr. Solo', 'department': 'ENT',
                     'slotsToday': 4, 'slotsBooked': 1, 'status': 'ON_DUTY'}],
        'billing': {'todayRevenue': 1},
    }
    store = RecordStore(InMemoryRepository(payload=json.dumps(persisted))).initialize()

    # whole collections / singletons replaced, no per-record reconciliation
    assert [d['id'] for d in store.state['doctors']] == ['DOC-900']
    assert store.state['billing'] == {'todayRevenue': 1}
    # keys absent from the snapshot keep their defaults
    assert store.state['patients'] == INITIAL_DB['patients']
    assert store.state['dashboardSnapshot'] == INITIAL_DB['dashboardSnapshot']


def test_corrupt_snapshot_falls_back_to_defaults(caplog):
    with caplog.at_level(logging.WARNING, logger='records.services.store'):
        store = RecordStore(InMemoryRepository(payload='{not json')).initialize()
    assert store.state == INITIAL_DB
    assert 'Failed to load record store' in caplog.text


def test_non_object_snapshot_falls_back_to_defaults(caplog):
    with caplog.at_level(logging.WARNING, logger='records.services.store'):
        store = RecordStore(InMemoryRepository(payload='[1, 2, 3]')).initialize()
    assert store.state == INITIAL_DB
    assert caplog.records


def test_unreadable_repository_never_raises(caplog):
    with caplog.at_level(logging.WARNING, logger='records.services.store'):
        store = RecordStore(BrokenRepository()).initialize()
    assert store.state == INITIAL_DB


def test_persist_writes_whole_store(store, repository):
    assert store.persist() is True
    assert json.loads(repository.payload) == store.state


def test_persist_failure_is_logged_and_state_kept(caplog):
    store = RecordStore(BrokenRepository()).initialize()
    store.state['billing']['pendingClearance'] = 99
    with caplog.at_level(logging.WARNING, logger='records.services.store'):
        assert store.persist() is False
    assert 'Failed to save record store' in caplog.text
    assert store.state['billing']['pendingClearance'] == 99


def test_reset_restores_defaults_and_persists(store, repository):
    store.state['appointments'].clear()
    store.state['billing']['todayRevenue'] = 0

    data = store.reset()

    assert data == INITIAL_DB
    assert json.dumps(store.state, sort_keys=True) == json.dumps(INITIAL_DB, sort_keys=True)
    # loading again from what reset wrote gives the same defaults
    reloaded = RecordStore(InMemoryRepository(payload=repository.payload)).initialize()
    assert reloaded.state == INITIAL_DB


def test_reset_result_is_a_copy(store):
    data = store.reset()
    data['doctors'].clear()
    assert len(store.state['doctors']) == len(INITIAL_DB['doctors'])


def test_records_returns_copies(store):
    doctors = store.records('doctors')
    doctors[0]['name'] = 'changed'
    doctors.pop()
    assert store.state['doctors'] == INITIAL_DB['doctors']


def test_pause_is_noop_when_latency_disabled(monkeypatch, store):
    calls = []
    monkeypatch.setattr('records.services.store.time.sleep', calls.append)
    store.pause(300)
    assert calls == []

    store.simulate_latency = True
    store.pause(300)
    assert calls == [0.3]


def test_generate_id_shape():
    apt_id = generate_id('APT')
    prefix, fragment, stamp = apt_id.split('-')
    assert prefix == 'APT'
    assert len(fragment) == 6
    assert all(c in '0123456789abcdefghijklmnopqrstuvwxyz' for c in fragment + stamp)


def test_consecutive_ids_differ():
    assert generate_id('APT') != generate_id('APT')


def test_default_prefix():
    assert generate_id().startswith('ID-')


def test_to_base36():
    assert to_base36(0) == '0'
    assert to_base36(35) == 'z'
    assert to_base36(36) == '10'
    assert to_base36(1700000000000) == 'loyw3v28'
