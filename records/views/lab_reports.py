from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.serializers.queries import LabReportListQuerySerializer
from records.services.queries import LAB_REPORT_SEARCH_FIELDS, apply_search, list_lab_reports
from records.services.store import get_store
from records.services.summaries import lab_summary


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def lab_reports(request):
    """Lab reports filtered by ``status``, then ``search`` over patient/test/department."""
    q = LabReportListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    store = get_store()
    reports = list_lab_reports(store, q.validated_data)
    return Response({
        'ok': True,
        'data': apply_search(reports, q.validated_data['search'], LAB_REPORT_SEARCH_FIELDS),
        'summary': lab_summary(store.records('labReports')),
    })
