# personas_api/repositories/__init__.py
"""
Repository layer public exports.

    from personas_api.repositories import PersonasRepository
"""

from .personas import MUTABLE_FIELDS, PersonasRepository

__all__ = [
    "MUTABLE_FIELDS",
    "PersonasRepository",
]
