"""Start-up entrypoint: apply migrations, then seed clients once.

Run this a single time per deployment, before starting the app server::

    python manage.py bootstrap && gunicorn config.wsgi
"""

from __future__ import annotations

from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Apply migrations and run start-up client seeding."

    def handle(self, *args, **options):
        self.stdout.write(self.style.HTTP_INFO("Step 1: applying migrations..."))
        call_command("migrate", interactive=False, verbosity=0, stdout=self.stdout)

        self.stdout.write(self.style.HTTP_INFO("Step 2: seeding clients..."))
        call_command("seed_clients", stdout=self.stdout)
