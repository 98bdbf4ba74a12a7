"""Startup seeding gated by ``SEED_ENABLED`` / ``SEED_COUNT`` settings.

Runs from the ``bootstrap`` management command, once per deployment,
never from the WSGI/ASGI modules.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.conf import settings

from modules.clients.generator import ClientGenerator
from modules.clients.models import Client
from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.services import ClientService

logger = structlog.get_logger(__name__)


def build_generator() -> ClientGenerator:
    return ClientGenerator(ClientService(repository=ClientDjangoRepository()))


def seed_if_enabled(generator: Optional[ClientGenerator] = None) -> int:
    """Run the generator when seeding is switched on and the table is empty.

    Returns the number of clients created (0 when disabled or already
    seeded).  Failures are logged and re-raised so a broken seed stops
    the start-up.
    """
    if not settings.SEED_ENABLED:
        logger.info("seed.disabled")
        return 0

    if Client.objects.exists():
        logger.info("seed.skipped", reason="clients_present")
        return 0

    count = settings.SEED_COUNT
    log = logger.bind(count=count)
    log.info("seed.started")
    generator = generator or build_generator()
    try:
        created = generator.generate(count)
    except Exception:
        log.exception("seed.failed")
        raise
    log.info("seed.completed", created=created)
    return created
