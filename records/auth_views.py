"""
Login endpoint.

Exchanges a username/password pair for the DRF token the rest of the
API checks.  The same token is returned on every login for a user.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from records.serializers.auth import LoginSerializer

logger = logging.getLogger(__name__)


class LoginRateThrottle(AnonRateThrottle):
    scope = 'login'


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def login_view(request):
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    username = s.validated_data['username']

    user = authenticate(request, username=username, password=s.validated_data['password'])
    if not user:
        logger.info('Failed login for %s from %s', username, request.META.get('REMOTE_ADDR'))
        return Response({'ok': False, 'error': {'code': 'invalid_credentials', 'message': 'Invalid username or password'}},
                        status=status.HTTP_400_BAD_REQUEST)

    token_obj, _ = Token.objects.get_or_create(user=user)
    return Response({
        'ok': True,
        'token': token_obj.key,
        'user': {
            'id': user.id,
            'username': user.username,
            'name': user.get_full_name() or user.username,
            'isStaff': user.is_staff,
        },
    })

