"""
ASGI config for the HealthSight demo backend.

Plain HTTP only; the record store has no push channel.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "healthsight.settings")

application = get_asgi_application()
