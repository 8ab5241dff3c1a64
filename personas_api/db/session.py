# personas_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Generator

import structlog
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from personas_api.db.models import Base

logger = structlog.get_logger()


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class PersonaStore:
    """
    Owner of the volatile persona collection.

    One instance is built per application by ``create_app`` and kept on
    ``app.state.store``. It holds the engine and the session factory; the
    data lives exactly as long as the engine does.

    An in-memory SQLite database exists per connection, so memory URLs are
    pinned to a single shared connection with ``StaticPool``. That connection
    is not safe for interleaved transactions, so ``session_scope`` holds the
    store lock for the whole unit of work.
    """

    def __init__(self, url: str = "sqlite://", *, name: str = "UsuarioList", echo: bool = False) -> None:
        self.name = name
        self.url = url
        self._lock = Lock()

        connect_args: dict[str, object] = {}
        engine_kwargs: dict[str, object] = {}
        if url.startswith("sqlite"):
            # SQLite needs this flag when used from a threaded web server.
            connect_args = {"check_same_thread": False}
            if _is_memory_url(url):
                engine_kwargs["poolclass"] = StaticPool

        self.engine: Engine = create_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            **engine_kwargs,
        )
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
            class_=Session,
        )

        Base.metadata.create_all(self.engine)
        logger.info("store_initialized", store=name, url=url)

    def session(self) -> Session:
        """
        Open a new session bound to this store, without taking the lock.

        Only for single-threaded callers; request handlers use ``session_scope``.
        """
        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Serialized transactional scope: commit on success, roll back on error.

            with store.session_scope() as db:
                ...

        The lock is taken and released in the calling thread, so enter and
        exit must happen in the same worker.
        """
        with self._lock:
            db = self.session()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self) -> None:
        """Drop every connection; an in-memory store loses its data."""
        self.engine.dispose()
        logger.info("store_disposed", store=self.name)


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------


def get_store(request: Request) -> PersonaStore:
    """Return the store owned by the running application."""
    return request.app.state.store


__all__ = ["PersonaStore", "get_store"]
