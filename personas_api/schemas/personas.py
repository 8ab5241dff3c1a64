"""
personas_api/schemas/personas.py

Pydantic models for the "personas" HTTP API.

Every field except ``id`` is optional at this layer: required-ness of the
identity number and first name is a create-time business rule checked in
``services.validation``, so a missing value surfaces as a 400 with the
rule's message instead of a framework 422.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from .common import APIModel


PersonaID = int


class PersonaBase(APIModel):
    """
    Fields shared by create / update / read for a persona.
    """

    identity_number: Optional[str] = Field(
        default=None,
        description=(
            "External identity document number. Integers are accepted and "
            "stored as their decimal string; the integer 0 counts as empty."
        ),
        examples=["0012345678"],
    )
    first_name: Optional[str] = Field(default=None, description="Given name", examples=["Ana"])
    last_name: Optional[str] = Field(default=None, description="Family name", examples=["Lopez"])
    email: Optional[str] = Field(default=None, description="Contact e-mail (not validated)")
    phone: Optional[str] = Field(default=None, description="Contact phone (not validated)")
    birth_date: Optional[str] = Field(
        default=None,
        description="Birth date as free text; never parsed.",
        examples=["1990-04-12"],
    )

    @field_validator("identity_number", mode="before")
    @classmethod
    def _coerce_identity_number(cls, value: Any) -> Any:
        # bool is an int subclass; leave it for the str validator to reject.
        if isinstance(value, int) and not isinstance(value, bool):
            # An integer 0 is an unset number, not the identity number "0".
            return str(value) if value != 0 else None
        return value


class PersonaCreate(PersonaBase):
    """
    Payload for creating a persona.

    Unknown keys, ``id`` included, are ignored; the store assigns the id.
    """

    model_config = ConfigDict(extra="ignore")


class PersonaUpdate(PersonaBase):
    """
    Full replacement payload. Omitted fields are stored as null.
    """

    model_config = ConfigDict(extra="ignore")


class PersonaRead(PersonaBase):
    """
    Stored persona as returned by the API.
    """

    id: PersonaID = Field(..., description="Identifier assigned by the store")


__all__ = [
    "PersonaID",
    "PersonaBase",
    "PersonaCreate",
    "PersonaUpdate",
    "PersonaRead",
]
