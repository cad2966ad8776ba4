from django.core.management.base import BaseCommand

from records.services.appointments import reset_demo_data
from records.services.store import get_store


class Command(BaseCommand):
    help = "Restore the demo dataset and overwrite the persisted store."

    def handle(self, *args, **options):
        store = get_store()
        data = reset_demo_data(store)
        counts = ", ".join(f"{name}={len(value)}" for name, value in data.items() if isinstance(value, list))
        self.stdout.write(self.style.SUCCESS(
            f"Demo data restored via {type(store.repository).__name__} ({counts})"
        ))
