# personas_api/routers/personas.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, List

from fastapi import APIRouter, Depends, Request, Response, status

from personas_api.db.session import PersonaStore, get_store
from personas_api.repositories.personas import PersonasRepository
from personas_api.schemas.common import ErrorResponse
from personas_api.schemas.personas import PersonaCreate, PersonaRead, PersonaUpdate
from personas_api.services.personas_service import PersonasService

router = APIRouter(prefix="/personas", tags=["personas"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "No persona with that id (empty body)"}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "First failed rule"}}


@contextmanager
def personas_service(request: Request, store: PersonaStore) -> Generator[PersonasService, None, None]:
    """
    Yield a PersonasService bound to one serialized unit of work on the store.

    Handlers open this inside their own body so the store lock is taken and
    released by the same worker thread.
    """
    settings = request.app.state.settings
    with store.session_scope() as db:
        yield PersonasService(
            PersonasRepository(db),
            validate_on_update=settings.VALIDATE_ON_UPDATE,
        )


@router.get(
    "/listar",
    response_model=List[PersonaRead],
    summary="List personas",
    description="Return every stored persona. No pagination, no filtering.",
)
def list_personas(
    request: Request,
    store: PersonaStore = Depends(get_store),
) -> List[PersonaRead]:
    with personas_service(request, store) as service:
        return service.list_personas()


@router.get(
    "/buscar/{persona_id}",
    response_model=PersonaRead,
    responses=_NOT_FOUND,
    summary="Get a single persona",
    description="Fetch a persona by its store-assigned numeric id.",
)
def get_persona(
    persona_id: int,
    request: Request,
    store: PersonaStore = Depends(get_store),
) -> PersonaRead:
    with personas_service(request, store) as service:
        return service.get_persona(persona_id)


@router.post(
    "/agregar",
    response_model=PersonaRead,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Create a persona",
    description=(
        "Validate and store a new persona. identityNumber and firstName must "
        "not be empty; only the first failing rule is reported. Any id in the "
        "body is ignored."
    ),
)
def create_persona(
    payload: PersonaCreate,
    request: Request,
    response: Response,
    store: PersonaStore = Depends(get_store),
) -> PersonaRead:
    with personas_service(request, store) as service:
        created = service.create_persona(payload)
    response.headers["Location"] = f"/personas/{created.identity_number}"
    return created


@router.put(
    "/modificar/{persona_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Replace a persona",
    description=(
        "Overwrite every field except id. Omitted fields are cleared. "
        "Rules are only re-checked when VALIDATE_ON_UPDATE is enabled."
    ),
)
def update_persona(
    persona_id: int,
    payload: PersonaUpdate,
    request: Request,
    store: PersonaStore = Depends(get_store),
) -> Response:
    with personas_service(request, store) as service:
        service.update_persona(persona_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/eliminar/{persona_id}",
    response_model=PersonaRead,
    responses=_NOT_FOUND,
    summary="Delete a persona",
    description="Remove a persona and return it as confirmation.",
)
def delete_persona(
    persona_id: int,
    request: Request,
    store: PersonaStore = Depends(get_store),
) -> PersonaRead:
    with personas_service(request, store) as service:
        return service.delete_persona(persona_id)
