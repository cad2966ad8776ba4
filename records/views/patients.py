"""
Patient list and detail endpoints.

``type`` and ``query`` are answered by the store query; the ``status``
pill filter (WAITING covers TRIAGE, HIGH_RISK maps to ICU_HIGH_RISK) is
applied here on top of that result.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.exceptions import RecordNotFound
from records.serializers.queries import PatientListQuerySerializer
from records.services.queries import filter_patients_by_status, get_patient_by_id, list_patients
from records.services.store import get_store
from records.services.summaries import patient_summary


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patients_list(request):
    q = PatientListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    store = get_store()
    patients = list_patients(store, q.validated_data)
    return Response({
        'ok': True,
        'data': filter_patients_by_status(patients, q.validated_data['status']),
        'summary': patient_summary(store.records('patients')),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk: str):
    patient = get_patient_by_id(get_store(), pk)
    if patient is None:
        raise RecordNotFound('Patient not found')
    return Response({'ok': True, 'data': patient})
