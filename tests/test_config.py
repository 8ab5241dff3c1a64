# tests/test_config.py
from personas_api.config import AppEnv, LogFormat, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "STORE_NAME", "VALIDATE_ON_UPDATE", "DOCS_ENABLED", "LOG_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == "sqlite://"
        assert settings.STORE_NAME == "UsuarioList"
        assert settings.VALIDATE_ON_UPDATE is False
        assert settings.DOCS_ENABLED is True
        assert settings.LOG_FORMAT == LogFormat.CONSOLE
        assert settings.docs_url == "/swagger"
        assert settings.openapi_url == "/swagger/v1/swagger.json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STORE_NAME", "TodoList")
        monkeypatch.setenv("VALIDATE_ON_UPDATE", "true")
        monkeypatch.setenv("APP_ENV", "production")

        settings = Settings(_env_file=None)

        assert settings.STORE_NAME == "TodoList"
        assert settings.VALIDATE_ON_UPDATE is True
        assert settings.APP_ENV == AppEnv.PRODUCTION

    def test_cors_origins_parsing(self):
        assert Settings(_env_file=None, CORS_ORIGINS="").cors_origins == []
        assert Settings(_env_file=None, CORS_ORIGINS="*").cors_origins == ["*"]
        assert Settings(_env_file=None, CORS_ORIGINS="http://a, http://b,").cors_origins == [
            "http://a",
            "http://b",
        ]
