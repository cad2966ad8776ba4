"""
Summary tiles for the list pages.

Each function takes the full, unfiltered collection (as returned by the
``list_*`` queries with no options) and returns the counters the page
header shows.  Status comparisons are case-insensitive.
"""
from __future__ import annotations

import math
from typing import Iterable, Mapping

from records.models import AppointmentStatus, DoctorStatus, LabReportStatus, PatientType, StockStatus
from records.services.queries import PATIENT_STATUS_GROUPS

# Completed lab reports slower than this count as delayed
LAB_DELAY_THRESHOLD_MINUTES = 45

WAITING_PATIENT_STATUSES = PATIENT_STATUS_GROUPS['WAITING']
HIGH_RISK_PATIENT_STATUS = PATIENT_STATUS_GROUPS['HIGH_RISK'][0]


def _status(record: Mapping) -> str:
    return str(record.get('status') or '').upper()


def _count(records: Iterable[Mapping], *statuses: str) -> int:
    return sum(1 for r in records if _status(r) in statuses)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def doctor_summary(doctors: list[dict]) -> dict:
    total_slots = sum(d.get('slotsToday') or 0 for d in doctors)
    total_booked = sum(d.get('slotsBooked') or 0 for d in doctors)
    return {
        'total': len(doctors),
        'onDuty': _count(doctors, DoctorStatus.ON_DUTY),
        'inOt': _count(doctors, DoctorStatus.IN_OT),
        'icuRounds': _count(doctors, DoctorStatus.ICU_ROUNDS),
        'utilizationPercent': round_half_up(total_booked / total_slots * 100) if total_slots > 0 else 0,
    }


def patient_summary(patients: list[dict]) -> dict:
    return {
        'total': len(patients),
        'opd': sum(1 for p in patients if p.get('type') == PatientType.OPD),
        'ipd': sum(1 for p in patients if p.get('type') == PatientType.IPD),
        'er': sum(1 for p in patients if p.get('type') == PatientType.ER),
        'waiting': _count(patients, *WAITING_PATIENT_STATUSES),
        'highRisk': _count(patients, HIGH_RISK_PATIENT_STATUS),
    }


def appointment_summary(appointments: list[dict]) -> dict:
    summary = {'total': len(appointments)}
    for status in AppointmentStatus.values:
        summary[status] = _count(appointments, status)
    return summary


def pharmacy_summary(items: list[dict]) -> dict:
    summary = {'total': len(items)}
    for status in StockStatus.values:
        summary[status] = _count(items, status)
    return summary


def lab_summary(reports: list[dict]) -> dict:
    tats = [r.get('tatMinutes') for r in reports if _is_number(r.get('tatMinutes'))]
    delayed = sum(
        1 for r in reports
        if _status(r) == LabReportStatus.COMPLETED
        and _is_number(r.get('tatMinutes'))
        and r['tatMinutes'] > LAB_DELAY_THRESHOLD_MINUTES
    )
    return {
        'total': len(reports),
        'completed': _count(reports, LabReportStatus.COMPLETED),
        'inProgress': _count(reports, LabReportStatus.IN_PROGRESS, LabReportStatus.SAMPLE_COLLECTED),
        'delayed': delayed,
        'avgTatMinutes': round_half_up(sum(tats) / len(tats)) if tats else 0,
    }
