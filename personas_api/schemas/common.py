# personas_api/schemas/common.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - camelCase on the wire, snake_case in Python
    - populate_by_name so services and tests can use either spelling
    - from_attributes so ORM rows convert with ``model_validate``
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


VALIDATION_ERROR_TYPE = "Validaciones"
INTERNAL_ERROR_TYPE = "Internal"


class ErrorResponse(APIModel):
    """
    Error object returned for rejected writes.
    """

    error_type: str = Field(
        ...,
        description="Error category, e.g. 'Validaciones'.",
        examples=[VALIDATION_ERROR_TYPE],
    )
    description: str = Field(
        ...,
        description="Human-readable message of the first rule that failed.",
    )


__all__ = [
    "APIModel",
    "ErrorResponse",
    "VALIDATION_ERROR_TYPE",
    "INTERNAL_ERROR_TYPE",
]
