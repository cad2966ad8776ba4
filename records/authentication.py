"""
Token authentication for the demo API.

The front end stores the token returned by ``api/auth/login`` and sends
it as ``Authorization: Bearer <key>``.  A request is authenticated when
the key exists; there is no expiry or refresh.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """DRF token lookup using the ``Bearer`` keyword."""

    keyword = 'Bearer'
