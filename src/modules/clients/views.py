"""Client API views.

Exposes ``ClientService`` over HTTP.  Path parameters are validated
here, before the service is called; domain exceptions bubble up to
``modules.core.exceptions.api_exception_handler`` which maps them to
status codes.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.clients.exceptions import NotFoundFailure, ValidationFailure
from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.serializers import ClientSerializer
from modules.clients.services import ClientService


BLANK_DOCUMENT_TYPE = "Document type must not be blank."
NON_INTEGER_DOCUMENT_NUMBER = "Document number must be an integer."
NON_POSITIVE_DOCUMENT_NUMBER = "Document number must be greater than 0."

# ASCII digits only, optional leading minus; no spaces, "+", or "_".
DOCUMENT_NUMBER_RE = re.compile(r"-?[0-9]+")


def validate_lookup(document_type: str, document_number: str | int) -> Tuple[str, int]:
    """Validate and normalise lookup path parameters.

    Raises:
        ValidationFailure: blank document type, or a document number that
            is not a positive integer.
    """
    if document_type is None or not document_type.strip():
        raise ValidationFailure(BLANK_DOCUMENT_TYPE)
    if isinstance(document_number, int):
        number = document_number
    elif isinstance(document_number, str) and DOCUMENT_NUMBER_RE.fullmatch(
        document_number
    ):
        number = int(document_number)
    else:
        raise ValidationFailure(NON_INTEGER_DOCUMENT_NUMBER)
    if number <= 0:
        raise ValidationFailure(NON_POSITIVE_DOCUMENT_NUMBER)
    return document_type.strip(), number


class ClientDetailView(APIView):
    """GET /api/v1/clients/{document_type}/{document_number}

    Uses ``ClientService`` with ``ClientDjangoRepository`` (DIP) unless a
    service is passed through ``as_view(service=...)``.
    """

    permission_classes = [AllowAny]
    service: Optional[ClientService] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = ClientService(repository=ClientDjangoRepository())

    @extend_schema(
        summary="Get a client by document type and number",
        responses={
            200: ClientSerializer,
            400: OpenApiResponse(description="Invalid document type or number."),
            404: OpenApiResponse(description="Client not found."),
            500: OpenApiResponse(description="Storage failure."),
        },
        tags=["Clients"],
    )
    def get(
        self, request: Request, document_type: str, document_number: str
    ) -> Response:
        document_type, number = validate_lookup(document_type, document_number)

        client = self.service.get_client(document_type, number)
        if client is None:
            raise NotFoundFailure()

        return Response(ClientSerializer(client).data)
