"""
Dashboard and billing tiles.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.services.queries import get_billing_summary, get_dashboard_snapshot
from records.services.store import get_store


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_snapshot(request):
    """Stored tiles plus doctor/patient/appointment/low-stock counts computed on every call."""
    return Response({'ok': True, 'data': get_dashboard_snapshot(get_store())})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def billing_summary(request):
    return Response({'ok': True, 'data': get_billing_summary(get_store())})
