import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class RecordNotFound(NotFound):
    default_detail = 'record not found'
    default_code = 'not_found'


class AppointmentNotFound(RecordNotFound):
    default_detail = 'Appointment not found'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('Unhandled error in %s', context.get('view'))
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    code = getattr(exc, 'default_code', None) or 'api_error'
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    # keep status and headers (WWW-Authenticate, Retry-After), replace the body
    resp.data = {'ok': False, 'error': {'code': code, 'message': detail}}
    return resp
