"""
Enumerations and the durable snapshot model for the record store.

The demo collections themselves are not Django models: they live in
memory inside :class:`records.services.store.RecordStore` and are
written out wholesale as one JSON document.  The only table is the
single key/value slot that document is saved into.
"""
from __future__ import annotations

from django.db import models


class DoctorStatus(models.TextChoices):
    ON_DUTY = 'ON_DUTY', 'On duty'
    IN_OT = 'IN_OT', 'In OT'
    ICU_ROUNDS = 'ICU_ROUNDS', 'ICU rounds'
    OFF_DUTY = 'OFF_DUTY', 'Off duty'


class PatientType(models.TextChoices):
    OPD = 'OPD', 'Outpatient'
    IPD = 'IPD', 'Inpatient'
    ER = 'ER', 'Emergency'


class AppointmentStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    CONFIRMED = 'CONFIRMED', 'Confirmed'
    CHECKED_IN = 'CHECKED_IN', 'Checked-in'
    CANCELLED = 'CANCELLED', 'Cancelled'
    NO_SHOW = 'NO_SHOW', 'No-show'


class StockStatus(models.TextChoices):
    OK = 'OK', 'OK'
    LOW = 'LOW', 'Low'
    CRITICAL = 'CRITICAL', 'Critical'
    OUT = 'OUT', 'Out of stock'


class LabReportStatus(models.TextChoices):
    COMPLETED = 'COMPLETED', 'Completed'
    IN_PROGRESS = 'IN_PROGRESS', 'In progress'
    SAMPLE_COLLECTED = 'SAMPLE_COLLECTED', 'Sample collected'
    CANCELLED = 'CANCELLED', 'Cancelled'


# Stock statuses that count towards the low-stock figures
LOW_STOCK_STATUSES = (StockStatus.LOW, StockStatus.CRITICAL, StockStatus.OUT)

# Sentinel for "match every value" in categorical filters
ALL = 'ALL'


class StoreSnapshot(models.Model):
    """One serialized copy of the whole record store.

    ``key`` names the slot (``RECORD_STORE_KEY``); ``payload`` is opaque
    JSON text overwritten on every mutation.
    """
    key = models.CharField(max_length=100, primary_key=True)
    payload = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.key} ({self.updated_at:%Y-%m-%d %H:%M})" if self.updated_at else self.key
