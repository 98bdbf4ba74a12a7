"""Client domain exceptions.

Every error carries an ``ErrorKind`` tag.  The API exception handler
maps the kind to an HTTP status code (``modules.core.exceptions``), so
neither the service nor the repository knows about HTTP.

- ``ValidationFailure``: raised at the API boundary, never reaches storage.
- ``NotFoundFailure``: synthesised by the API boundary from an empty
  lookup result.  The service and repository return ``None`` instead.
- ``StorageFailure``: raised by the repository for any persistence error.
"""

from __future__ import annotations

from modules.core.exceptions import DomainError, ErrorKind

__all__ = [
    "ClientError",
    "ErrorKind",
    "NotFoundFailure",
    "StorageFailure",
    "ValidationFailure",
]


class ClientError(DomainError):
    """Base class for errors surfaced by the client records pipeline."""


class ValidationFailure(ClientError):
    """Malformed lookup input (blank document type, bad document number)."""

    kind = ErrorKind.VALIDATION


class NotFoundFailure(ClientError):
    """No client matches the requested document type/number pair."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Client not found.") -> None:
        super().__init__(message)


class StorageFailure(ClientError):
    """The persistence layer rejected a read or write."""

    kind = ErrorKind.STORAGE
