"""
personas_api.db
===============

Storage primitives for the Personas HTTP API:

    from personas_api.db import Base, Persona, PersonaStore, get_store
"""

from .models import Base, Persona
from .session import PersonaStore, get_store

__all__ = [
    "Base",
    "Persona",
    "PersonaStore",
    "get_store",
]
