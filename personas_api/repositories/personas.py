# personas_api/repositories/personas.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from ..db import models

# Columns a full replacement overwrites; ``id`` is never among them.
MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "birth_date",
    "identity_number",
)


class PersonasRepository:
    """
    Thin data-access layer around the Persona model.

    Methods flush but never commit; the service layer owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.Persona)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_personas(self) -> Sequence[models.Persona]:
        """
        Return every stored persona in insertion (id) order.
        """
        stmt = self._base_select().order_by(models.Persona.id)
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def get_by_id(self, persona_id: int) -> Optional[models.Persona]:
        """
        Fetch a single persona by primary key, or None if it does not exist.
        """
        return self.session.get(models.Persona, persona_id)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def add(self, **fields: Any) -> models.Persona:
        """
        Insert a new persona and flush so the generated id is populated.

        An ``id`` key in ``fields`` is dropped; the database assigns it.
        """
        fields.pop("id", None)
        persona = models.Persona(**fields)

        self.session.add(persona)
        self.session.flush()

        return persona

    def replace(self, persona: models.Persona, **fields: Any) -> models.Persona:
        """
        Overwrite every mutable column of ``persona``.

        Columns missing from ``fields`` are set to None: this is a full
        replacement, not a patch.
        """
        for name in MUTABLE_FIELDS:
            setattr(persona, name, fields.get(name))

        self.session.flush()
        return persona

    def remove(self, persona: models.Persona) -> None:
        """
        Delete a persona instance.
        """
        self.session.delete(persona)
        self.session.flush()
