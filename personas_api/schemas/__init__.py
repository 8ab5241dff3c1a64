"""
Top-level export module for HTTP API schemas.
"""

from .common import (
    APIModel,
    ErrorResponse,
    INTERNAL_ERROR_TYPE,
    VALIDATION_ERROR_TYPE,
)
from .personas import (
    PersonaBase,
    PersonaCreate,
    PersonaID,
    PersonaRead,
    PersonaUpdate,
)

__all__ = [
    "APIModel",
    "ErrorResponse",
    "INTERNAL_ERROR_TYPE",
    "VALIDATION_ERROR_TYPE",
    "PersonaBase",
    "PersonaCreate",
    "PersonaID",
    "PersonaRead",
    "PersonaUpdate",
]
