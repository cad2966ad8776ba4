import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.permissions import IsStaffUser
from records.services.appointments import reset_demo_data
from records.services.store import get_store

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStaffUser])
def reset_demo(request):
    """Throw away runtime changes and restore the demo dataset."""
    data = reset_demo_data(get_store())
    logger.info('Demo data reset by %s', request.user)
    return Response({'ok': True, 'data': data})
