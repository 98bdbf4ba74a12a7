"""Client service layer (Use Cases).

Sits between the API boundary and the repository.  Inputs are not
validated here (the API boundary does that) and failures are never
translated, retried or recovered: they are logged and re-raised as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

if TYPE_CHECKING:
    from modules.clients.dtos import ClientDTO
    from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientService:
    """Application service for Client use-cases.

    Receives an ``IClientRepository`` via constructor injection (DIP).
    Stateless: one instance may be shared across requests.
    """

    def __init__(self, repository: IClientRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_client(
        self, document_type: str, document_number: int
    ) -> Optional[ClientDTO]:
        """Look up a client by document type and number.

        Returns ``None`` when no client matches.

        Raises:
            StorageFailure: propagated unchanged from the repository.
        """
        log = logger.bind(document_type=document_type)
        log.info("client.lookup")
        try:
            client = self._repo.fetch(document_type, document_number)
        except Exception:
            log.exception("client.lookup_failed")
            raise

        if client is None:
            log.warning("client.not_found")
        else:
            log.info("client.found")
        return client

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_client(self, client: ClientDTO) -> None:
        """Insert a new client.

        Raises:
            StorageFailure: propagated unchanged from the repository.
        """
        log = logger.bind(document_type=client.document_type)
        log.info("client.creating")
        try:
            self._repo.insert(client)
        except Exception:
            log.exception("client.create_failed")
            raise
        log.info("client.created")
