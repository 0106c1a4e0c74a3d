"""Application export – ExportRequest and ExportResult."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from hr_export.application.export.columns import ColumnSelection
from hr_export.application.export.export_service import ExportFormat
from hr_export.application.export.projector import References
from hr_export.application.export.registry import ExportProfile

__all__ = ["ExportRequest", "ExportResult"]


@dataclass(frozen=True)
class ExportRequest:
    """Describes one click of a dialog's Download button."""

    profile: ExportProfile
    selection: ColumnSelection
    records: Sequence[Mapping[str, Any]]
    references: References = field(default_factory=dict)
    format: ExportFormat | None = None   # None -> settings.default_format
    totals_row: bool = False


@dataclass(frozen=True)
class ExportResult:
    """What a successful export produced."""

    file_name: str
    location: str
    format: str
    row_count: int
    column_count: int
