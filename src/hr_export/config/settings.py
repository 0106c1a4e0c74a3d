"""Config – Settings base class and ExportSettings."""
from __future__ import annotations

import dataclasses
import logging

from hr_export.config.errors import InvalidSettingValueError

__all__ = ["SUPPORTED_FORMATS", "ExportSettings", "Settings"]

SUPPORTED_FORMATS = ("xlsx", "csv", "json")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings; ``_prefix`` scopes the env vars."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExportSettings(Settings):
    """Runtime knobs for the export pipeline, read from ``HR_EXPORT_*``."""

    _prefix: dataclasses.ClassVar[str] = "HR_EXPORT"

    output_dir: str = "exports"
    default_format: str = "xlsx"
    column_width: int = 20
    pending_message: str = "Exporting data to Excel ..."
    success_message: str = "Export successful!"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.default_format not in SUPPORTED_FORMATS:
            raise InvalidSettingValueError(
                "default_format", self.default_format, f"expected one of {', '.join(SUPPORTED_FORMATS)}"
            )
        if self.column_width <= 0:
            raise InvalidSettingValueError("column_width", self.column_width, "must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def level(self) -> int:
        """Numeric logging level for :class:`JsonLoggerFactory`."""
        return logging.getLevelName(self.log_level.upper())
