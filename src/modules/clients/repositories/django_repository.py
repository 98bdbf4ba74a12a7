"""Django ORM implementation of the Client repository.

Satisfies ``IClientRepository`` using Django's QuerySet API.
A missing row yields ``None``; every ``DatabaseError`` (integrity
violations included) is re-raised as ``StorageFailure`` chained to the
underlying error, so callers see one storage error type regardless of backend.
Failures are not logged here; the service layer logs them once.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import DatabaseError, transaction

from modules.clients.dtos import ClientDTO
from modules.clients.exceptions import StorageFailure
from modules.clients.models import Client
from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientDjangoRepository(IClientRepository):
    """Concrete Client repository backed by Django ORM."""

    def fetch(self, document_type: str, document_number: int) -> Optional[ClientDTO]:
        try:
            client = Client.objects.filter(
                document_type=document_type,
                document_number=document_number,
            ).first()
        except DatabaseError as exc:
            raise StorageFailure(str(exc)) from exc

        if client is None:
            return None
        return ClientDTO.from_entity(client)

    def insert(self, client: ClientDTO) -> None:
        log = logger.bind(document_type=client.document_type)
        try:
            with transaction.atomic():
                entity = Client.objects.create(**client.model_dump())
        except DatabaseError as exc:
            raise StorageFailure(str(exc)) from exc
        log.info("client.saved", client_id=str(entity.id))
