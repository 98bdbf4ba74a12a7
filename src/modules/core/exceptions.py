"""Error kinds and the project-wide DRF exception handler.

Domain code raises ``DomainError`` subclasses tagged with an
``ErrorKind``; ``status_for`` turns the kind into an HTTP status.
``api_exception_handler`` renders every error response in one shape::

    {"type": "client_error", "errors": [{"code": "...", "detail": "...", "attr": null}]}
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Dict, Iterator, List, Optional

import structlog
from rest_framework import status
from rest_framework.exceptions import APIException, ErrorDetail
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class ErrorKind(StrEnum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    STORAGE = "STORAGE"


class DomainError(Exception):
    """Base for errors raised by domain modules, tagged with a kind."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: Optional[ErrorKind]) -> int:
    """Map an error kind to its HTTP status; unknown kinds are server errors."""
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _error_type(status_code: int) -> str:
    return "server_error" if status_code >= 500 else "client_error"


def _flatten(details: Any, attr: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """Flatten DRF ``get_full_details()`` output into a list of errors."""
    if isinstance(details, dict) and {"message", "code"} <= details.keys():
        yield {"code": details["code"], "detail": str(details["message"]), "attr": attr}
    elif isinstance(details, ErrorDetail):
        yield {"code": details.code, "detail": str(details), "attr": attr}
    elif isinstance(details, dict):
        for key, value in details.items():
            yield from _flatten(value, None if key == "detail" else key)
    elif isinstance(details, list):
        for item in details:
            yield from _flatten(item, attr)


def _error_response(status_code: int, errors: List[Dict[str, Any]]) -> Response:
    return Response(
        {"type": _error_type(status_code), "errors": errors},
        status=status_code,
    )


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    if isinstance(exc, DomainError):
        status_code = status_for(exc.kind)
        # Misses and storage failures are already logged by the service layer.
        if exc.kind == ErrorKind.VALIDATION:
            logger.warning("api.validation_error", error=exc.message)
        if status_code >= 500:
            detail = f"Internal server error: {exc.message}"
        else:
            detail = exc.message
        code = exc.kind.lower() if exc.kind else "error"
        return _error_response(
            status_code, [{"code": code, "detail": detail, "attr": None}]
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, APIException):
            errors = list(_flatten(exc.get_full_details()))
        else:
            errors = list(_flatten(response.data))
        response.data = {"type": _error_type(response.status_code), "errors": errors}
        return response

    logger.exception("api.unhandled_error")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        [{"code": "error", "detail": f"Internal server error: {exc}", "attr": None}],
    )
