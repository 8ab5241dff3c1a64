"""
personas_api
------------

HTTP API for managing person records.

This package exposes:

- ``create_app()``: application factory returning a FastAPI instance.
- ``app``: a module-level ASGI application, suitable for uvicorn entrypoints
  like ``personas_api:app``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("personas-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"

from .main import app, create_app

__all__ = [
    "__version__",
    "create_app",
    "app",
]
