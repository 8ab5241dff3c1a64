# tests/http_api/test_docs.py
from fastapi import status
from fastapi.testclient import TestClient

from personas_api.config import AppEnv, Settings
from personas_api.main import create_app


class TestDocumentation:
    def test_root_redirects_to_swagger(self, client):
        response = client.get("/", follow_redirects=False)

        assert response.status_code == status.HTTP_301_MOVED_PERMANENTLY
        assert response.headers["location"] == "/swagger"

    def test_swagger_ui_served(self, client):
        response = client.get("/swagger")
        assert response.status_code == status.HTTP_200_OK
        assert "text/html" in response.headers["content-type"]

    def test_openapi_metadata(self, client):
        doc = client.get("/swagger/v1/swagger.json").json()

        assert doc["info"]["title"] == "Api Persona"
        assert doc["info"]["description"] == "Administracion de datos personales"
        assert doc["info"]["version"] == "v1"
        assert doc["info"]["termsOfService"] == "https://example.com/terms"
        assert doc["info"]["contact"]["name"] == "Example Contact"
        assert doc["info"]["license"]["name"] == "Example Licence"

    def test_root_excluded_from_schema(self, client):
        doc = client.get("/swagger/v1/swagger.json").json()
        assert "/" not in doc["paths"]
        assert "/personas/agregar" in doc["paths"]

    def test_docs_can_be_disabled(self):
        settings = Settings(_env_file=None, APP_ENV=AppEnv.TESTING, DOCS_ENABLED=False)
        with TestClient(create_app(settings)) as client:
            assert client.get("/swagger").status_code == status.HTTP_404_NOT_FOUND
            assert client.get("/", follow_redirects=False).status_code == status.HTTP_404_NOT_FOUND


class TestMiddleware:
    def test_https_redirect(self):
        settings = Settings(_env_file=None, APP_ENV=AppEnv.TESTING, FORCE_HTTPS=True)
        with TestClient(create_app(settings)) as client:
            response = client.get("/personas/listar", follow_redirects=False)

        assert response.status_code == status.HTTP_307_TEMPORARY_REDIRECT
        assert response.headers["location"].startswith("https://")

    def test_cors_headers(self):
        settings = Settings(
            _env_file=None,
            APP_ENV=AppEnv.TESTING,
            CORS_ORIGINS="http://localhost:3000",
        )
        with TestClient(create_app(settings)) as client:
            response = client.get(
                "/personas/listar",
                headers={"Origin": "http://localhost:3000"},
            )

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
