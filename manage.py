#!/usr/bin/env python
"""
Command line entry point for the HealthSight demo backend.

Points Django at ``healthsight.settings`` and hands over to the
management utility, so ``python manage.py reset_demo_data`` and friends
work from the repository root.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the HealthSight project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'healthsight.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed in the active "
            "virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
