"""Observability – structured logging helpers."""
from hr_export.observability.logging.factory import HANDLER_NAME, JsonLoggerFactory
from hr_export.observability.logging.logger import get_logger

__all__ = [
    "HANDLER_NAME",
    "JsonLoggerFactory",
    "get_logger",
]
