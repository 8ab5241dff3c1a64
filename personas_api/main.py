"""
Entry point for the Personas HTTP API.

This module creates the FastAPI application, wires up middleware and
exception handlers, owns the in-memory store, and mounts the personas
router.

Intended usage:
    uvicorn personas_api.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from personas_api.config import Settings, get_settings
from personas_api.db.session import PersonaStore
from personas_api.logging_config import configure_logging
from personas_api.routers import personas
from personas_api.schemas.common import INTERNAL_ERROR_TYPE, VALIDATION_ERROR_TYPE, ErrorResponse
from personas_api.services.personas_service import PersonaNotFoundError, PersonaValidationError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle: log startup, release the store on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(
        "app_startup",
        app=settings.APP_NAME,
        env=settings.APP_ENV.value,
        store=app.state.store.name,
    )

    yield

    logger.info("app_shutdown")
    app.state.store.dispose()


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(PersonaNotFoundError)
    async def not_found_handler(request: Request, exc: PersonaNotFoundError) -> Response:
        logger.info("persona_not_found", persona_id=exc.persona_id, path=request.url.path)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(PersonaValidationError)
    async def validation_handler(request: Request, exc: PersonaValidationError) -> JSONResponse:
        body = ErrorResponse(error_type=VALIDATION_ERROR_TYPE, description=exc.description)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Catch unhandled exceptions so stack traces never reach the client.
        """
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        body = ErrorResponse(
            error_type=INTERNAL_ERROR_TYPE,
            description=str(exc) if settings.DEBUG else "Internal Server Error",
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(by_alias=True),
        )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Each call builds a fresh store, so two apps never share records. Logging
    is configured once per process from the environment; passing explicit
    ``settings`` reconfigures it from those settings.
    """
    explicit = settings is not None
    settings = settings or get_settings()
    configure_logging(settings, force=explicit)

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        terms_of_service=settings.TERMS_OF_SERVICE_URL,
        contact={"name": settings.CONTACT_NAME, "url": settings.CONTACT_URL},
        license_info={"name": settings.LICENSE_NAME, "url": settings.LICENSE_URL},
        debug=settings.DEBUG,
        openapi_url=settings.openapi_url if settings.DOCS_ENABLED else None,
        docs_url=settings.docs_url if settings.DOCS_ENABLED else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = PersonaStore(
        settings.DATABASE_URL,
        name=settings.STORE_NAME,
        echo=settings.DEBUG,
    )

    if settings.FORCE_HTTPS:
        app.add_middleware(HTTPSRedirectMiddleware)

    cors_origins = settings.cors_origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=cors_origins != ["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _register_exception_handlers(app, settings)

    if settings.DOCS_ENABLED:

        @app.get("/", include_in_schema=False)
        async def root(request: Request) -> RedirectResponse:
            root_path = request.scope.get("root_path", "")
            return RedirectResponse(
                url=f"{root_path}{settings.docs_url}",
                status_code=status.HTTP_301_MOVED_PERMANENTLY,
            )

    app.include_router(personas.router)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "personas_api.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.DEBUG,
    )
