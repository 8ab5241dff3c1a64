"""
personas_api.services
---------------------

Service layer aggregation for the Personas HTTP API.

Routers should import from this package instead of depending directly on
repositories:

    from personas_api.services import PersonasService, PersonaNotFoundError
"""

from .personas_service import (
    PersonaError,
    PersonaNotFoundError,
    PersonasService,
    PersonaValidationError,
)
from .validation import CREATE_RULES, first_violation

__all__ = [
    "PersonaError",
    "PersonaNotFoundError",
    "PersonasService",
    "PersonaValidationError",
    "CREATE_RULES",
    "first_violation",
]
