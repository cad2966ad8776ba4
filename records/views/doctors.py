from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.exceptions import RecordNotFound
from records.serializers.queries import DoctorListQuerySerializer
from records.services.queries import filter_doctors, get_doctor_by_id, list_doctors
from records.services.store import get_store
from records.services.summaries import doctor_summary


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctors_list(request):
    """Doctor roster.
    Query params:
      - status: ON_DUTY | IN_OT | ICU_ROUNDS | OFF_DUTY | ALL
      - department: exact department name or ALL
      - search: name / department / id contains
    ``summary`` is computed over all doctors, not the filtered page.
    """
    q = DoctorListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    doctors = list_doctors(get_store())
    return Response({
        'ok': True,
        'data': filter_doctors(doctors, q.validated_data),
        'summary': doctor_summary(doctors),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctor_detail(request, pk: str):
    doctor = get_doctor_by_id(get_store(), pk)
    if doctor is None:
        raise RecordNotFound('Doctor not found')
    return Response({'ok': True, 'data': doctor})
