"""Unit tests for lookup validation and error-kind status mapping.

Covers:
- validate_lookup: blank type, zero/negative/non-numeric number, and
  number syntax beyond plain ASCII digits (underscores, signs, spaces).
- ClientDetailView: invalid input never reaches the service.
- status_for: kind -> HTTP status mapping.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from rest_framework.test import APIRequestFactory

from modules.clients.dtos import ClientDTO
from modules.clients.exceptions import (
    ErrorKind,
    NotFoundFailure,
    StorageFailure,
    ValidationFailure,
)
from modules.clients.views import ClientDetailView, validate_lookup
from modules.core.exceptions import status_for

pytestmark = pytest.mark.unit


# ===========================================================================
# validate_lookup
# ===========================================================================


class TestValidateLookup:
    def test_valid_input_is_normalised(self):
        assert validate_lookup(" CC ", "123") == ("CC", 123)

    def test_accepts_int_document_number(self):
        assert validate_lookup("P", 87654321) == ("P", 87654321)

    @pytest.mark.parametrize("document_type", ["", "   ", None])
    def test_blank_document_type(self, document_type):
        with pytest.raises(ValidationFailure, match="Document type must not be blank."):
            validate_lookup(document_type, 123)

    @pytest.mark.parametrize("document_number", [0, "0", -1, "-42"])
    def test_non_positive_document_number(self, document_number):
        with pytest.raises(
            ValidationFailure, match="Document number must be greater than 0."
        ):
            validate_lookup("CC", document_number)

    @pytest.mark.parametrize(
        "document_number",
        ["abc", "12.5", "", "1_000", " 1000", "1000 ", "+1000", "١٠٠٠", "1e3"],
    )
    def test_non_integer_document_number(self, document_number):
        with pytest.raises(ValidationFailure, match="Document number must be an integer."):
            validate_lookup("CC", document_number)


# ===========================================================================
# ClientDetailView with a service double
# ===========================================================================


@pytest.fixture()
def mock_service():
    return MagicMock()


@pytest.fixture()
def call_view(mock_service):
    factory = APIRequestFactory()
    view = ClientDetailView.as_view(service=mock_service)

    def _call(document_type, document_number):
        request = factory.get(f"/api/v1/clients/{document_type}/{document_number}")
        return view(request, document_type=document_type, document_number=document_number)

    return _call


class TestClientDetailViewBoundary:
    @pytest.mark.parametrize(
        "document_type, document_number",
        [("", "123"), ("CC", "0"), ("CC", "-5"), ("CC", "abc"), ("CC", "1_000")],
    )
    def test_invalid_input_never_calls_service(
        self, call_view, mock_service, document_type, document_number
    ):
        response = call_view(document_type, document_number)

        assert response.status_code == 400
        mock_service.get_client.assert_not_called()

    def test_present_returns_200(self, call_view, mock_service):
        mock_service.get_client.return_value = ClientDTO(
            document_type="CC",
            document_number=123,
            first_name="Juan",
            middle_name="Carlos",
            last_name="Pérez",
            second_last_name="Gómez",
            phone="300-1234567",
            address="Calle 1 # 2-3",
            city="Bogotá",
        )

        response = call_view("CC", "123")

        assert response.status_code == 200
        assert response.data["first_name"] == "Juan"
        mock_service.get_client.assert_called_once_with("CC", 123)

    def test_absent_returns_404(self, call_view, mock_service):
        mock_service.get_client.return_value = None

        response = call_view("CC", "999")

        assert response.status_code == 404
        assert response.data["errors"][0]["detail"] == "Client not found."

    def test_storage_failure_returns_500(self, call_view, mock_service):
        mock_service.get_client.side_effect = StorageFailure("DB caída")

        response = call_view("CC", "123")

        assert response.status_code == 500
        assert response.data["errors"][0]["detail"] == "Internal server error: DB caída"


# ===========================================================================
# status_for
# ===========================================================================


class TestStatusFor:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ErrorKind.VALIDATION, 400),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.STORAGE, 500),
            (None, 500),
        ],
    )
    def test_maps_kind_to_status(self, kind, expected):
        assert status_for(kind) == expected

    def test_exceptions_carry_their_kind(self):
        assert ValidationFailure("x").kind is ErrorKind.VALIDATION
        assert NotFoundFailure().kind is ErrorKind.NOT_FOUND
        assert StorageFailure("x").kind is ErrorKind.STORAGE
