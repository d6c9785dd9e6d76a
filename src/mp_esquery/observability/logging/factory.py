"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

LIBRARY_LOGGER = "mp_esquery"


class JsonLoggerFactory:
    """Configure structlog output routed through stdlib logging.

    The compilers only ever emit ``debug`` (``query.built``) and ``warning``
    (rejected input) events under the ``mp_esquery`` logger.  ``query_level``
    lets an application see those without lowering its root level.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        json: bool = True,
        query_level: int | None = None,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

        logging.getLogger(LIBRARY_LOGGER).setLevel(query_level if query_level is not None else logging.NOTSET)


__all__ = ["JsonLoggerFactory", "LIBRARY_LOGGER"]
