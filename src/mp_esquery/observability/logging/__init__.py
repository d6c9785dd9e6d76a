"""Observability – structured logging helpers."""
from mp_esquery.observability.logging.factory import LIBRARY_LOGGER, JsonLoggerFactory
from mp_esquery.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "LIBRARY_LOGGER", "get_logger"]
