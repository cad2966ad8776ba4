import json

import pytest
from rest_framework.exceptions import ValidationError

from records.defaults import INITIAL_DB
from records.exceptions import AppointmentNotFound
from records.services.appointments import create_appointment, reset_demo_data, update_appointment_status
from records.services.queries import get_appointment_by_id, get_dashboard_snapshot
from records.services.repositories import InMemoryRepository
from records.services.store import RecordStore


def test_create_appointment_defaults(store, repository):
    apt = create_appointment(store, {'patientName': 'X', 'doctorId': 'D1'})

    assert apt['id'].startswith('APT-')
    assert apt['token'] == 'T-4'
    assert apt['patientId'] is None
    assert apt['doctorName'] == 'Unknown doctor'
    assert apt['department'] == 'General'
    assert apt['type'] == 'OPD'
    assert apt['time'] == 'To be decided'
    assert apt['status'] == 'PENDING'
    # appended last and persisted
    assert store.state['appointments'][-1] == apt
    assert json.loads(repository.payload)['appointments'][-1] == apt


def test_create_appointment_ignores_supplied_status(store):
    apt = create_appointment(store, {'patientName': 'X', 'doctorId': 'D1', 'status': 'CONFIRMED'})
    assert apt['status'] == 'PENDING'


def test_create_appointment_keeps_supplied_fields(store):
    apt = create_appointment(store, {
        'patientName': 'Meena Iyer', 'patientId': 'UHID-30001', 'doctorId': 'DOC-003',
        'doctorName': 'Dr. Anjali', 'department': 'Pediatrics', 'type': 'TELE',
        'time': '11:30 AM', 'token': 'P-07',
    })
    assert apt['token'] == 'P-07'
    assert apt['patientId'] == 'UHID-30001'
    assert apt['doctorName'] == 'Dr. Anjali'
    assert apt['type'] == 'TELE'
    assert apt['time'] == '11:30 AM'


def test_create_appointment_blank_optional_fields_use_defaults(store):
    apt = create_appointment(store, {'patientName': 'X', 'doctorId': 'D1', 'patientId': '', 'department': ''})
    assert apt['patientId'] is None
    assert apt['department'] == 'General'


@pytest.mark.parametrize('payload', [
    {'doctorId': 'D1'},
    {'patientName': 'X'},
    {'patientName': '', 'doctorId': 'D1'},
])
def test_create_appointment_requires_patient_and_doctor(store, repository, payload):
    with pytest.raises(ValidationError):
        create_appointment(store, payload)
    assert len(store.state['appointments']) == 3
    assert repository.saves == 0


def test_created_ids_are_unique(store):
    first = create_appointment(store, {'patientName': 'A', 'doctorId': 'D1'})
    second = create_appointment(store, {'patientName': 'B', 'doctorId': 'D1'})
    assert first['id'] != second['id']
    assert second['token'] == 'T-5'


def test_returned_appointment_is_a_copy(store):
    apt = create_appointment(store, {'patientName': 'X', 'doctorId': 'D1'})
    apt['status'] = 'CONFIRMED'
    assert store.state['appointments'][-1]['status'] == 'PENDING'


def test_update_status_changes_only_status(store, repository):
    before = get_appointment_by_id(store, 'APT-1002')
    updated = update_appointment_status(store, 'APT-1002', 'CANCELLED')

    assert updated == {**before, 'status': 'CANCELLED'}
    assert get_appointment_by_id(store, 'APT-1002')['status'] == 'CANCELLED'
    assert json.loads(repository.payload)['appointments'][1]['status'] == 'CANCELLED'
    # neighbours untouched
    assert store.state['appointments'][0] == INITIAL_DB['appointments'][0]
    assert store.state['appointments'][2] == INITIAL_DB['appointments'][2]


def test_update_status_accepts_any_value_by_default(store):
    assert update_appointment_status(store, 'APT-1001', 'rescheduled')['status'] == 'rescheduled'


def test_update_status_strict_rejects_unknown_value(store):
    with pytest.raises(ValidationError):
        update_appointment_status(store, 'APT-1001', 'rescheduled', strict=True)
    assert store.state['appointments'][0]['status'] == 'CONFIRMED'
    assert update_appointment_status(store, 'APT-1001', 'NO_SHOW', strict=True)['status'] == 'NO_SHOW'


def test_update_status_unknown_id(store, repository):
    with pytest.raises(AppointmentNotFound):
        update_appointment_status(store, 'APT-9999', 'CANCELLED')
    assert store.state['appointments'] == INITIAL_DB['appointments']
    assert repository.saves == 0


def test_dashboard_counts_follow_new_appointment(store):
    before = get_dashboard_snapshot(store)
    create_appointment(store, {'patientName': 'X', 'doctorId': 'D1'})
    after = get_dashboard_snapshot(store)

    assert after['totalAppointmentsToday'] == before['totalAppointmentsToday'] + 1
    assert {k: v for k, v in after.items() if k != 'totalAppointmentsToday'} == \
        {k: v for k, v in before.items() if k != 'totalAppointmentsToday'}


def test_reset_discards_runtime_changes(store, repository):
    create_appointment(store, {'patientName': 'X', 'doctorId': 'D1'})
    update_appointment_status(store, 'APT-1001', 'CANCELLED')

    data = reset_demo_data(store)

    assert data == INITIAL_DB
    assert store.state == INITIAL_DB
    assert json.loads(repository.payload) == INITIAL_DB


def test_persist_failure_does_not_undo_mutation(store, monkeypatch):
    def boom(payload):
        raise OSError('read-only')
    monkeypatch.setattr(store.repository, 'save', boom)

    apt = create_appointment(store, {'patientName': 'X', 'doctorId': 'D1'})
    assert store.state['appointments'][-1]['id'] == apt['id']


def test_create_appointment_replaces_null_collection():
    repository = InMemoryRepository(payload=json.dumps({'appointments': None}))
    store = RecordStore(repository).initialize()

    apt = create_appointment(store, {'patientName': 'X', 'doctorId': 'D1'})

    assert apt['token'] == 'T-1'
    assert store.state['appointments'] == [apt]
    assert json.loads(repository.payload)['appointments'] == [apt]
