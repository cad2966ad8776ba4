"""
Appointment mutations and the demo reset.

These are the only operations that change a store.  Each one applies
its change under the store lock, persists the whole store, then returns
a copy of what changed.
"""
from __future__ import annotations

import logging
from typing import Mapping

from rest_framework.exceptions import ValidationError

from records.exceptions import AppointmentNotFound
from records.models import AppointmentStatus
from records.services.ids import generate_id
from records.services.store import RecordStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('patientName', 'doctorId')


def create_appointment(store: RecordStore, payload: Mapping) -> dict:
    """Append a new PENDING appointment built from ``payload``.

    ``patientName`` and ``doctorId`` are required.  Any ``status`` in
    the payload is ignored.
    """
    missing = [f for f in REQUIRED_FIELDS if not payload.get(f)]
    if missing:
        raise ValidationError({f: ['This field is required.'] for f in missing})

    store.pause(300)
    with store.lock:
        if not isinstance(store.state.get('appointments'), list):
            store.state['appointments'] = []
        appointments = store.state['appointments']
        apt = {
            'id': generate_id('APT'),
            'token': payload.get('token') or f"T-{len(appointments) + 1}",
            'patientName': payload['patientName'],
            'patientId': payload.get('patientId') or None,
            'doctorId': payload['doctorId'],
            'doctorName': payload.get('doctorName') or 'Unknown doctor',
            'department': payload.get('department') or 'General',
            'type': payload.get('type') or 'OPD',
            'time': payload.get('time') or 'To be decided',
            'status': AppointmentStatus.PENDING.value,
        }
        appointments.append(apt)
        store.persist()
        logger.info('Appointment %s created for doctor %s', apt['id'], apt['doctorId'])
        return dict(apt)


def update_appointment_status(store: RecordStore, appointment_id: str, new_status, *, strict: bool = False) -> dict:
    """Set the status of one appointment and return the updated record.

    The value is stored verbatim unless ``strict`` is set, in which case
    it must be one of :class:`AppointmentStatus`.
    """
    if strict and new_status not in AppointmentStatus.values:
        raise ValidationError({'status': [f'"{new_status}" is not a valid appointment status.']})

    store.pause(250)
    with store.lock:
        apt = next((a for a in store.state.get('appointments') or [] if a.get('id') == appointment_id), None)
        if apt is None:
            raise AppointmentNotFound()
        previous = apt.get('status')
        apt['status'] = new_status
        store.persist()
        logger.info('Appointment %s status %s -> %s', appointment_id, previous, new_status)
        return dict(apt)


def reset_demo_data(store: RecordStore) -> dict:
    """Restore the compiled-in dataset and return a copy of the whole store."""
    store.pause(200)
    return store.reset()
