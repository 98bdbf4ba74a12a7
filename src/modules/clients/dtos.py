"""Client DTO shared by the Service Layer, repositories and API.

``ClientDTO`` is a framework-agnostic, immutable (``frozen=True``)
Pydantic v2 model.  Layers exchange clients by value: the repository
maps ORM rows into DTOs and never hands a model instance upwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.clients.models import Client


class ClientDTO(BaseModel):
    """A fully populated client record.

    Validates:
    - ``document_type`` is stripped and must not be blank.
    - ``document_number`` is strictly positive.
    """

    model_config = ConfigDict(frozen=True)

    document_type: str = Field(min_length=1, max_length=5)
    document_number: int = Field(gt=0)
    first_name: str
    middle_name: str
    last_name: str
    second_last_name: str
    phone: str
    address: str
    city: str

    @field_validator("document_type", mode="before")
    @classmethod
    def strip_document_type(cls, v: str) -> str:
        if not isinstance(v, str):
            return v
        return v.strip()

    @classmethod
    def from_entity(cls, client: Client) -> ClientDTO:
        """Build a DTO from a persisted ``Client`` row."""
        return cls(
            document_type=client.document_type,
            document_number=client.document_number,
            first_name=client.first_name,
            middle_name=client.middle_name,
            last_name=client.last_name,
            second_last_name=client.second_last_name,
            phone=client.phone,
            address=client.address,
            city=client.city,
        )
