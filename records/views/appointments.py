"""
Appointment endpoints.

Listing supports ``status``, ``doctorId``, ``type`` and ``search``.
Creating always yields a PENDING appointment; status changes go through
the dedicated ``/status`` endpoint and accept any value unless
``RECORD_STORE_STRICT_STATUS`` is enabled.
"""
from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.exceptions import AppointmentNotFound
from records.serializers.appointments import AppointmentCreateSerializer, AppointmentStatusSerializer
from records.serializers.queries import AppointmentListQuerySerializer
from records.services.appointments import create_appointment, update_appointment_status
from records.services.queries import get_appointment_by_id, list_appointments
from records.services.store import get_store
from records.services.summaries import appointment_summary


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointments(request):
    store = get_store()
    if request.method == 'POST':
        s = AppointmentCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        apt = create_appointment(store, s.validated_data)
        return Response({'ok': True, 'data': apt}, status=status.HTTP_201_CREATED)

    q = AppointmentListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    return Response({
        'ok': True,
        'data': list_appointments(store, q.validated_data),
        'summary': appointment_summary(store.records('appointments')),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk: str):
    apt = get_appointment_by_id(get_store(), pk)
    if apt is None:
        raise AppointmentNotFound()
    return Response({'ok': True, 'data': apt})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def appointment_update_status(request, pk: str):
    s = AppointmentStatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    apt = update_appointment_status(
        get_store(), pk, s.validated_data['status'],
        strict=getattr(settings, 'RECORD_STORE_STRICT_STATUS', False),
    )
    return Response({'ok': True, 'data': apt})
