# personas_api/services/personas_service.py

from __future__ import annotations

from typing import List

import structlog

from personas_api.repositories.personas import PersonasRepository
from personas_api.schemas.personas import PersonaCreate, PersonaRead, PersonaUpdate
from personas_api.services.validation import first_violation

logger = structlog.get_logger()


class PersonaError(Exception):
    """Base class for persona-level failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PersonaNotFoundError(PersonaError):
    """Raised when no persona is stored under the requested id."""

    def __init__(self, persona_id: int) -> None:
        super().__init__(f"Persona with id={persona_id} not found.")
        self.persona_id = persona_id


class PersonaValidationError(PersonaError):
    """Raised when a payload breaks a rule; carries the first failing message."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description


class PersonasService:
    """
    High-level service for working with personas.

    Responsibilities:
    - Run the create-time rule set (and the update one, when enabled).
    - Delegate persistence to `PersonasRepository` and commit.
    - Convert ORM rows to API schemas (`PersonaRead`).
    """

    def __init__(self, repo: PersonasRepository, *, validate_on_update: bool = False) -> None:
        self._repo = repo
        self._validate_on_update = validate_on_update

    def _ensure_valid(self, payload: PersonaCreate | PersonaUpdate) -> None:
        description = first_violation(payload)
        if description is not None:
            logger.info("persona_validation_failed", description=description)
            raise PersonaValidationError(description)

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def list_personas(self) -> List[PersonaRead]:
        return [PersonaRead.model_validate(p) for p in self._repo.list_personas()]

    def get_persona(self, persona_id: int) -> PersonaRead:
        persona = self._repo.get_by_id(persona_id)
        if persona is None:
            raise PersonaNotFoundError(persona_id)
        return PersonaRead.model_validate(persona)

    def create_persona(self, payload: PersonaCreate) -> PersonaRead:
        """
        Validate and store a new persona. Identity numbers may repeat.
        """
        self._ensure_valid(payload)

        persona = self._repo.add(**payload.model_dump())
        self._repo.session.commit()

        logger.info("persona_created", persona_id=persona.id)
        return PersonaRead.model_validate(persona)

    def update_persona(self, persona_id: int, payload: PersonaUpdate) -> None:
        """
        Replace every mutable field of an existing persona.

        No rules run unless the service was built with
        ``validate_on_update=True``, so by default an update may clear the
        identity number or first name.
        """
        persona = self._repo.get_by_id(persona_id)
        if persona is None:
            raise PersonaNotFoundError(persona_id)

        if self._validate_on_update:
            self._ensure_valid(payload)

        self._repo.replace(persona, **payload.model_dump())
        self._repo.session.commit()

        logger.info("persona_updated", persona_id=persona_id)

    def delete_persona(self, persona_id: int) -> PersonaRead:
        """
        Remove a persona and return its last stored state.
        """
        persona = self._repo.get_by_id(persona_id)
        if persona is None:
            raise PersonaNotFoundError(persona_id)

        removed = PersonaRead.model_validate(persona)
        self._repo.remove(persona)
        self._repo.session.commit()

        logger.info("persona_deleted", persona_id=persona_id)
        return removed
