from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand

from modules.clients.seeding import build_generator, seed_if_enabled


class Command(BaseCommand):
    help = "Seed the database with random synthetic clients."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=None,
            help="Number of clients to create with --force (defaults to SEED_COUNT).",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Seed even when SEED_ENABLED is off or clients already exist.",
        )

    def handle(self, *args, **options):
        if not options["force"]:
            if not settings.SEED_ENABLED:
                self.stdout.write(
                    self.style.WARNING("Client seeding disabled (SEED_ENABLED=False).")
                )
                return
            created = seed_if_enabled()
            if created == 0:
                self.stdout.write("No clients seeded (table not empty or SEED_COUNT=0).")
                return
            self.stdout.write(self.style.SUCCESS(f"Seed completed: clients={created}"))
            return

        count = options["count"]
        if count is None:
            count = settings.SEED_COUNT

        self.stdout.write(f"Creating {count} clients...")
        created = build_generator().generate(count)
        self.stdout.write(self.style.SUCCESS(f"Seed completed: clients={created}"))
