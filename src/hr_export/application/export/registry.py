"""Application export – ExportProfile and the built-in column registries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from hr_export.application.export.columns import ColumnSelection, ColumnSpec, derived, lookup, raw
from hr_export.application.export.derivations import format_value, numeric, pending, percentage, title_case

__all__ = [
    "DAILY_WORKS",
    "DAILY_WORK_SUMMARY",
    "ExportProfile",
]


@dataclass(frozen=True)
class ExportProfile:
    """One export dialog: its columns plus fixed file and sheet names."""

    name: str
    file_stem: str
    sheet_name: str
    columns: tuple[ColumnSpec, ...]
    summable: tuple[str, ...] = ()   # numeric keys totalled by the overall summary row
    summary_label_key: str = "date"

    def __post_init__(self) -> None:
        labels = [spec.label for spec in self.columns]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"Duplicate column labels in '{self.name}': {duplicates}")
        if not self.columns:
            raise ValueError(f"Profile '{self.name}' declares no columns")

    def file_name(self, fmt: str = "xlsx") -> str:
        return f"{self.file_stem}.{fmt}"

    def selection(self) -> ColumnSelection:
        """Fresh selection with every column enabled."""
        return ColumnSelection.from_specs(self.columns)

    @property
    def supports_totals(self) -> bool:
        return bool(self.summable)


# ---------------------------------------------------------------------------
# Daily Work Summary
# ---------------------------------------------------------------------------


def _pending(record: Mapping[str, Any]) -> str:
    return pending(numeric(record, "totalDailyWorks"), numeric(record, "completed"))


def _completion_percentage(record: Mapping[str, Any]) -> str:
    return percentage(numeric(record, "completed"), numeric(record, "totalDailyWorks"))


def _rfi_submission_percentage(record: Mapping[str, Any]) -> str:
    return percentage(numeric(record, "rfiSubmissions"), numeric(record, "totalDailyWorks"))


DAILY_WORK_SUMMARY = ExportProfile(
    name="Daily Work Summary",
    file_stem="DailyWorkSummary",
    sheet_name="Daily Work Summary",
    columns=(
        raw("Date", "date"),
        raw("Total Daily Works", "totalDailyWorks"),
        raw("Resubmissions", "resubmissions"),
        raw("Embankment", "embankment"),
        raw("Structure", "structure"),
        raw("Pavement", "pavement"),
        raw("Completed", "completed"),
        derived("Pending", "pending", _pending),
        derived("Completion Percentage", "completionPercentage", _completion_percentage),
        raw("RFI Submissions", "rfiSubmissions"),
        derived("RFI Submission Percentage", "rfiSubmissionPercentage", _rfi_submission_percentage),
    ),
    summable=(
        "totalDailyWorks",
        "resubmissions",
        "embankment",
        "structure",
        "pavement",
        "completed",
        "rfiSubmissions",
    ),
)


# ---------------------------------------------------------------------------
# Daily Works
# ---------------------------------------------------------------------------


def _status(record: Mapping[str, Any]) -> str:
    return title_case(format_value(record.get("status")))


DAILY_WORKS = ExportProfile(
    name="Daily Works",
    file_stem="DailyWorks",
    sheet_name="Daily Works",
    columns=(
        raw("Date", "date"),
        raw("RFI No.", "number"),
        derived("Status", "status", _status),
        lookup("Assigned", "assigned", "users"),
        lookup("In charge", "incharge", "users"),
        raw("Type", "type"),
        raw("Description", "description"),
        raw("Location", "location"),
        raw("Side", "side"),
        raw("Quantity/Layer", "qty_layer"),
        raw("Planned Time", "planned_time"),
        raw("Completion Time", "completion_time"),
        raw("Results", "inspection_details"),
        raw("Resubmission Count", "resubmission_count"),
        raw("RFI Submission Date", "rfi_submission_date"),
    ),
)
