"""Application export – error taxonomy of the export pipeline."""
from __future__ import annotations

from typing import Any

from hr_export.kernel.errors import DomainError, SerializationError, ValidationError

__all__ = [
    "ExportProjectionError",
    "ExportSerializationError",
    "ExportValidationError",
    "NoColumnsSelectedError",
    "NoDataError",
    "SelectionMismatchError",
    "TotalsUnsupportedError",
]


class ExportValidationError(ValidationError):
    """The export request was rejected before any row was processed."""

    default_code = "export_validation_error"


class NoColumnsSelectedError(ExportValidationError):
    default_code = "no_columns_selected"

    def __init__(self, message: str = "No columns selected for export.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NoDataError(ExportValidationError):
    default_code = "no_data"

    def __init__(self, message: str = "No data available for export.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class TotalsUnsupportedError(ExportValidationError):
    """A totals row was requested for a profile without summable fields."""

    default_code = "totals_unsupported"

    def __init__(self, profile: str, **kwargs: Any) -> None:
        super().__init__(f"'{profile}' export does not support an overall summary row.", **kwargs)
        self.profile = profile


class SelectionMismatchError(ExportValidationError):
    """The selection was not built from the requested profile's columns."""

    default_code = "selection_mismatch"

    def __init__(self, profile: str, **kwargs: Any) -> None:
        super().__init__(f"Column selection does not match the '{profile}' export.", **kwargs)
        self.profile = profile


class ExportProjectionError(DomainError):
    """A record could not be turned into a row.

    Shares the serialization failure's wording so the renderer shows one
    kind of message for any mid-export failure.
    """

    default_code = "export_projection_failed"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to export data: {cause}", cause=cause)


class ExportSerializationError(SerializationError):
    """Writing or delivering the spreadsheet failed.

    The message embeds the underlying cause so it can be shown verbatim.
    """

    default_code = "export_serialization_failed"

    def __init__(self, cause: BaseException, *, payload_type: str | None = None) -> None:
        super().__init__(
            f"Failed to export data: {cause}",
            payload_type=payload_type,
            cause=cause,
        )
