# tests/__init__.py
"""
Test Suite for the Personas API.

Organization:
- `core`: rules, schemas, repository and service against a real in-memory store.
- `http_api`: end-to-end tests through FastAPI's TestClient.
"""
