"""
Read-only queries over a :class:`~records.services.store.RecordStore`.

List functions take an optional options mapping using the same
camelCase keys the front end sends (``status``, ``doctorId``,
``search`` ...).  Unknown keys are ignored and missing ones mean "match
everything".  Categorical filters run first; free-text search runs last
and is a case-insensitive substring test over a fixed set of fields.
Results keep collection order and are always copies.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from records.models import ALL, LOW_STOCK_STATUSES, StockStatus
from records.services.store import RecordStore

PATIENT_SEARCH_FIELDS = ('name', 'id', 'department')
APPOINTMENT_SEARCH_FIELDS = ('patientName', 'patientId', 'doctorName', 'department', 'token')
DOCTOR_SEARCH_FIELDS = ('name', 'department', 'id')
PHARMACY_SEARCH_FIELDS = ('name', 'code', 'form')
LAB_REPORT_SEARCH_FIELDS = ('patientName', 'patientId', 'testName', 'department')


def normalize_term(term: Optional[str]) -> str:
    return (term or '').strip().lower()


def matches_search(record: Mapping, term: Optional[str], fields: Iterable[str]) -> bool:
    q = normalize_term(term)
    if not q:
        return True
    return any(q in str(record.get(f) or '').lower() for f in fields)


def apply_search(records: list[dict], term: Optional[str], fields: Iterable[str]) -> list[dict]:
    """Keep the records whose ``fields`` contain ``term``; order is preserved."""
    fields = tuple(fields)
    if not normalize_term(term):
        return list(records)
    return [r for r in records if matches_search(r, term, fields)]


def _option(options: Optional[Mapping], key: str, default=ALL):
    value = (options or {}).get(key)
    return default if value is None else value


def _matches(record: Mapping, field: str, wanted) -> bool:
    return wanted == ALL or record.get(field) == wanted


# -- dashboard ---------------------------------------------------------------

def _is_low_stock(item: Mapping) -> bool:
    return item.get('status') in LOW_STOCK_STATUSES


def get_dashboard_snapshot(store: RecordStore) -> dict:
    """Stored tiles plus four counts recomputed from the collections."""
    store.pause(200)
    with store.lock:
        state = store.state
        return {
            **store.singleton('dashboardSnapshot'),
            'totalDoctors': len(state.get('doctors') or []),
            'totalPatientsToday': len(state.get('patients') or []),
            'totalAppointmentsToday': len(state.get('appointments') or []),
            'lowStockCount': sum(1 for i in state.get('pharmacyItems') or [] if _is_low_stock(i)),
        }


# -- doctors -----------------------------------------------------------------

def list_doctors(store: RecordStore) -> list[dict]:
    store.pause(150)
    return store.records('doctors')


def get_doctor_by_id(store: RecordStore, doctor_id: str) -> Optional[dict]:
    store.pause(150)
    return next((d for d in store.records('doctors') if d.get('id') == doctor_id), None)


# -- patients ----------------------------------------------------------------

def list_patients(store: RecordStore, options: Optional[Mapping] = None) -> list[dict]:
    """Options: ``type`` (ALL/OPD/IPD/ER) and ``query``."""
    store.pause(200)
    ptype = _option(options, 'type')
    query = _option(options, 'query', '')
    return [
        p for p in store.records('patients')
        if _matches(p, 'type', ptype) and matches_search(p, query, PATIENT_SEARCH_FIELDS)
    ]


def get_patient_by_id(store: RecordStore, patient_id: str) -> Optional[dict]:
    store.pause(150)
    return next((p for p in store.records('patients') if p.get('id') == patient_id), None)


# -- appointments ------------------------------------------------------------

def list_appointments(store: RecordStore, options: Optional[Mapping] = None) -> list[dict]:
    """Options: ``status``, ``doctorId``, ``type`` and ``search``."""
    store.pause(250)
    status = _option(options, 'status')
    doctor_id = _option(options, 'doctorId')
    atype = _option(options, 'type')
    search = _option(options, 'search', '')
    return [
        a for a in store.records('appointments')
        if _matches(a, 'status', status)
        and _matches(a, 'doctorId', doctor_id)
        and _matches(a, 'type', atype)
        and matches_search(a, search, APPOINTMENT_SEARCH_FIELDS)
    ]


def get_appointment_by_id(store: RecordStore, appointment_id: str) -> Optional[dict]:
    store.pause(150)
    return next((a for a in store.records('appointments') if a.get('id') == appointment_id), None)


# -- pharmacy ----------------------------------------------------------------

def list_pharmacy_items(store: RecordStore, options: Optional[Mapping] = None) -> list[dict]:
    """Options: ``stockStatus`` (ALL/OK/LOW/CRITICAL/OUT)."""
    store.pause(250)
    stock_status = _option(options, 'stockStatus')
    return [i for i in store.records('pharmacyItems') if _matches(i, 'status', stock_status)]


def get_low_stock_summary(store: RecordStore) -> dict:
    store.pause(200)
    items = store.records('pharmacyItems')
    low = [i for i in items if _is_low_stock(i)]
    return {
        'totalTracked': len(items),
        'lowCount': len(low),
        'criticalCount': sum(1 for i in low if i.get('status') == StockStatus.CRITICAL),
        'outOfStockCount': sum(1 for i in low if i.get('status') == StockStatus.OUT),
        'items': low,
    }


# -- lab reports -------------------------------------------------------------

def list_lab_reports(store: RecordStore, options: Optional[Mapping] = None) -> list[dict]:
    """Options: ``status``."""
    store.pause(250)
    status = _option(options, 'status')
    return [r for r in store.records('labReports') if _matches(r, 'status', status)]


# -- billing -----------------------------------------------------------------

def get_billing_summary(store: RecordStore) -> dict:
    store.pause(200)
    return store.singleton('billing')


# -- page-level filters ------------------------------------------------------
# Applied by the views on top of the core queries above.

PATIENT_STATUS_GROUPS = {
    'WAITING': ('WAITING', 'TRIAGE'),
    'HIGH_RISK': ('ICU_HIGH_RISK',),
}


def filter_patients_by_status(patients: list[dict], status: Optional[str]) -> list[dict]:
    """Status pills on the patients page; WAITING also covers TRIAGE."""
    wanted = (status or ALL).upper()
    if wanted == ALL:
        return list(patients)
    accepted = PATIENT_STATUS_GROUPS.get(wanted, (wanted,))
    return [p for p in patients if str(p.get('status') or '').upper() in accepted]


def filter_doctors(doctors: list[dict], options: Optional[Mapping] = None) -> list[dict]:
    """``status`` (case-insensitive), ``department`` (exact) and ``search``."""
    status = str(_option(options, 'status')).upper()
    department = _option(options, 'department')
    search = _option(options, 'search', '')
    return [
        d for d in doctors
        if (status == ALL or str(d.get('status') or '').upper() == status)
        and (department == ALL or (d.get('department') or '') == department)
        and matches_search(d, search, DOCTOR_SEARCH_FIELDS)
    ]
