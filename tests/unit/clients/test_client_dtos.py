"""Unit tests for ClientDTO.

Covers:
- Construction with all fields; none may be omitted.
- Key invariants: non-blank document type, positive document number.
- Frozen immutability and value equality.
- from_entity factory.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.clients.dtos import ClientDTO
from modules.clients.models import Client

pytestmark = pytest.mark.unit


def _payload(**overrides) -> dict:
    data = {
        "document_type": "CC",
        "document_number": 123,
        "first_name": "Juan",
        "middle_name": "Carlos",
        "last_name": "Pérez",
        "second_last_name": "Gómez",
        "phone": "300-1234567",
        "address": "Calle 1 # 2-3",
        "city": "Bogotá",
    }
    data.update(overrides)
    return data


class TestClientDTOValid:
    def test_create_with_all_fields(self):
        dto = ClientDTO(**_payload())
        assert dto.document_type == "CC"
        assert dto.document_number == 123
        assert dto.city == "Bogotá"

    @pytest.mark.parametrize(
        "field", ["middle_name", "second_last_name", "phone", "address", "city"]
    )
    def test_every_field_is_required(self, field):
        data = _payload()
        del data[field]
        with pytest.raises(ValidationError):
            ClientDTO(**data)

    def test_empty_strings_are_accepted(self):
        dto = ClientDTO(**_payload(middle_name="", second_last_name=""))
        assert dto.middle_name == ""
        assert dto.second_last_name == ""

    def test_document_type_is_stripped(self):
        dto = ClientDTO(**_payload(document_type="  C "))
        assert dto.document_type == "C"

    def test_numeric_string_document_number_is_coerced(self):
        dto = ClientDTO(**_payload(document_number="456"))
        assert dto.document_number == 456


class TestClientDTOValidation:
    @pytest.mark.parametrize("document_type", ["", "   "])
    def test_blank_document_type_raises(self, document_type):
        with pytest.raises(ValidationError):
            ClientDTO(**_payload(document_type=document_type))

    @pytest.mark.parametrize("document_number", [0, -1, -99999999])
    def test_non_positive_document_number_raises(self, document_number):
        with pytest.raises(ValidationError):
            ClientDTO(**_payload(document_number=document_number))

    def test_missing_first_name_raises(self):
        data = _payload()
        del data["first_name"]
        with pytest.raises(ValidationError):
            ClientDTO(**data)


class TestClientDTOFrozen:
    def test_is_immutable(self):
        dto = ClientDTO(**_payload())
        with pytest.raises(ValidationError):
            dto.first_name = "Changed"

    def test_equal_by_value(self):
        assert ClientDTO(**_payload()) == ClientDTO(**_payload())
        assert ClientDTO(**_payload()) != ClientDTO(**_payload(city="Cali"))


class TestClientDTOFromEntity:
    def test_from_entity_preserves_all_fields(self):
        entity = Client(**_payload())
        entity.save()
        dto = ClientDTO.from_entity(entity)
        assert dto == ClientDTO(**_payload())

    def test_model_str_masks_document_number(self):
        entity = Client(**_payload(document_number=12345678))
        assert str(entity) == "Juan Pérez (CC: ***5678)"
