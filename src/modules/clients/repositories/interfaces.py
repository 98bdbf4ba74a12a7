"""Client repository interface (Dependency Inversion Principle).

The Service Layer depends on ``IClientRepository`` only, never on the
ORM.  Any storage technology can implement the two operations below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.clients.dtos import ClientDTO


class IClientRepository(ABC):
    """Repository contract for client records."""

    @abstractmethod
    def fetch(self, document_type: str, document_number: int) -> Optional[ClientDTO]:
        """Return the matching client, or ``None`` when absent.

        Absence is a normal outcome and must not raise.

        Raises:
            StorageFailure: if the lookup itself fails.
        """

    @abstractmethod
    def insert(self, client: ClientDTO) -> None:
        """Persist a new client.

        Raises:
            StorageFailure: if storage rejects the write (constraint
                violation, lost connection, timeout).
        """
