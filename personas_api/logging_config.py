# personas_api/logging_config.py

"""
Logging setup for the Personas HTTP API.

``configure_logging`` wires ``structlog`` to emit structured JSON logs
(production) or colored console logs (development), and points the
standard library root logger at the same level so uvicorn and SQLAlchemy
output is filtered consistently.

Modules then log through structlog directly::

    import structlog

    logger = structlog.get_logger()
    logger.bind(persona_id=3).info("persona_deleted")
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from personas_api.config import LogFormat, Settings, get_settings

_CONFIGURED = False


def _parse_level(value: Optional[str]) -> int:
    """
    Map a level name ('DEBUG', 'info', ...) to a logging constant.
    Unknown names fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None, *, force: bool = False) -> None:
    """
    Configure structlog and the standard logging library.

    Safe to call repeatedly: only the first call (or a call with
    ``force=True``) changes the configuration. Loggers are not cached, so a
    forced reconfiguration also reaches module-level ``structlog.get_logger()``
    proxies created earlier.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    settings = settings or get_settings()
    level = _parse_level(settings.LOG_LEVEL)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=force,
    )

    _CONFIGURED = True


__all__ = ["configure_logging"]
