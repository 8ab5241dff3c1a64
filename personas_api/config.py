# personas_api/config.py

"""
Configuration for the Personas HTTP API.

Values are read from environment variables (and an optional ``.env`` file)
by ``pydantic-settings``. Every field has a default suitable for local
development, so the service starts with no configuration at all.

Typical usage
=============

    from personas_api.config import get_settings

    settings = get_settings()
    app = FastAPI(title=settings.API_TITLE, debug=settings.DEBUG)

Tests build their own ``Settings`` instance and hand it to
``personas_api.main.create_app`` instead of touching the environment.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central configuration registry for the service.
    """

    # --- Application Meta ---
    APP_NAME: str = "personas-api"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Persistence ---
    # Anything other than an in-memory URL works too, but the store is
    # meant to be volatile: tables are created on startup and never migrated.
    DATABASE_URL: str = "sqlite://"
    STORE_NAME: str = "UsuarioList"

    # --- HTTP surface ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DOCS_ENABLED: bool = True
    FORCE_HTTPS: bool = False
    CORS_ORIGINS: str = ""

    # --- Behaviour ---
    VALIDATE_ON_UPDATE: bool = False

    # --- OpenAPI document ---
    API_TITLE: str = "Api Persona"
    API_DESCRIPTION: str = "Administracion de datos personales"
    API_VERSION: str = "v1"
    TERMS_OF_SERVICE_URL: str = "https://example.com/terms"
    CONTACT_NAME: str = "Example Contact"
    CONTACT_URL: str = "https://example.com/contact"
    LICENSE_NAME: str = "Example Licence"
    LICENSE_URL: str = "https://example.com/licence"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        """
        Parse ``CORS_ORIGINS`` into a list. An empty list disables CORS.
        """
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw:
            return []
        if raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]

    @property
    def docs_url(self) -> str:
        return "/swagger"

    @property
    def openapi_url(self) -> str:
        return f"/swagger/{self.API_VERSION}/swagger.json"


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide settings, reading the environment on first use.
    """
    return Settings()


__all__ = ["AppEnv", "LogFormat", "Settings", "get_settings"]
