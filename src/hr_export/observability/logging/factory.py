"""Observability – JsonLoggerFactory.

Routes structlog events and plain :mod:`logging` records (openpyxl,
python-dotenv) through one JSON formatter on the root logger.
"""
from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from hr_export.config.settings import ExportSettings

HANDLER_NAME = "hr_export.json"


def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    ]


class JsonLoggerFactory:
    """Configure structlog for JSON lines on the root logger.

    Calling :meth:`configure` again swaps the previous export handler
    instead of stacking a second one; handlers installed by anything else
    are left alone.
    """

    @staticmethod
    def configure(level: int = logging.INFO, *, stream: IO[str] | None = None) -> logging.Handler:
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_pre_chain(),
                structlog.processors.StackInfoRenderer(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        handler = logging.StreamHandler(stream)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=_pre_chain(),
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
            root.removeHandler(existing)
        root.addHandler(handler)
        root.setLevel(level)
        return handler

    @classmethod
    def from_settings(cls, settings: ExportSettings, *, stream: IO[str] | None = None) -> logging.Handler:
        """Configure at ``settings.log_level`` (``HR_EXPORT_LOG_LEVEL``)."""
        return cls.configure(settings.level, stream=stream)


__all__ = ["HANDLER_NAME", "JsonLoggerFactory"]
