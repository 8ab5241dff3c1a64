# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from personas_api.config import AppEnv, Settings
from personas_api.db.session import PersonaStore
from personas_api.main import create_app
from personas_api.repositories.personas import PersonasRepository
from personas_api.services.personas_service import PersonasService


@pytest.fixture(scope="function")
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, APP_ENV=AppEnv.TESTING, DATABASE_URL="sqlite://")


@pytest.fixture(scope="function")
def store():
    """A fresh, empty in-memory store per test."""
    store = PersonaStore("sqlite://", name="TestList")
    yield store
    store.dispose()


@pytest.fixture(scope="function")
def session(store):
    db = store.session()
    yield db
    db.close()


@pytest.fixture(scope="function")
def repo(session):
    return PersonasRepository(session)


@pytest.fixture(scope="function")
def service(repo):
    return PersonasService(repo)


@pytest.fixture(scope="function")
def app(settings):
    """Application with its own store; records never leak between tests."""
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_payload():
    """Provides a complete, valid persona body in wire (camelCase) form."""
    return {
        "identityNumber": "0012345678",
        "firstName": "Ana",
        "lastName": "Perez",
        "email": "ana@example.com",
        "phone": "+598 99 123 456",
        "birthDate": "1990-04-12",
    }
