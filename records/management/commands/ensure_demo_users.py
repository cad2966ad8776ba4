# records/management/commands/ensure_demo_users.py
from django.contrib.auth import get_user_model
from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from rest_framework.authtoken.models import Token

# username, password, full name, staff
DEMO_USERS = [
    ("admin", "admin123", "Admin User", True),
    ("doctor", "doctor123", "Dr. Sarah Johnson", False),
    ("staff", "staff123", "Staff Member", False),
]


class Command(BaseCommand):
    help = "Ensure the demo accounts exist with their known passwords (idempotent)."

    def handle(self, *args, **opts):
        User = get_user_model()
        for username, password, full_name, is_staff in DEMO_USERS:
            first_name, _, last_name = full_name.partition(" ")
            u, created = User.objects.get_or_create(
                username=username,
                defaults={
                    "password": make_password(password),
                    "first_name": first_name,
                    "last_name": last_name,
                    "is_staff": is_staff,
                    "is_active": True,
                },
            )
            if not created:
                u.password = make_password(password)
                u.is_staff = is_staff
                u.is_active = True
                u.save(update_fields=["password", "is_staff", "is_active"])
            Token.objects.get_or_create(user=u)
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({'staff' if is_staff else 'user'})"))
        self.stdout.write(self.style.SUCCESS("All demo users ensured."))
