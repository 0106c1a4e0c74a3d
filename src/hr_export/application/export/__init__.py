"""Application export – selective tabular export pipeline."""
from hr_export.application.export.artifact import ExportArtifact
from hr_export.application.export.columns import (
    ColumnKind,
    ColumnSelection,
    ColumnSpec,
    Derived,
    ForeignLookup,
    Raw,
    SelectedColumn,
    derived,
    lookup,
    raw,
)
from hr_export.application.export.csv_export import CsvExporter
from hr_export.application.export.derivations import (
    NOT_AVAILABLE,
    format_value,
    lookup_name,
    numeric,
    pending,
    percentage,
    title_case,
)
from hr_export.application.export.errors import (
    ExportProjectionError,
    ExportSerializationError,
    ExportValidationError,
    NoColumnsSelectedError,
    NoDataError,
    SelectionMismatchError,
    TotalsUnsupportedError,
)
from hr_export.application.export.excel_export import ExcelExporter
from hr_export.application.export.export_service import ExportFormat, TableSerializer
from hr_export.application.export.json_export import JsonExporter
from hr_export.application.export.orchestrator import ExportOrchestrator, ExportState
from hr_export.application.export.projector import ProjectedRow, project, project_all
from hr_export.application.export.registry import DAILY_WORK_SUMMARY, DAILY_WORKS, ExportProfile
from hr_export.application.export.request import ExportRequest, ExportResult
from hr_export.application.export.sink import DownloadSink, FileSystemDownloadSink, InMemoryDownloadSink
from hr_export.application.export.summary import OVERALL_SUMMARY_LABEL, overall_summary

__all__ = [
    "DAILY_WORKS",
    "DAILY_WORK_SUMMARY",
    "NOT_AVAILABLE",
    "OVERALL_SUMMARY_LABEL",
    "ColumnKind",
    "ColumnSelection",
    "ColumnSpec",
    "CsvExporter",
    "Derived",
    "DownloadSink",
    "ExcelExporter",
    "ExportArtifact",
    "ExportFormat",
    "ExportOrchestrator",
    "ExportProfile",
    "ExportRequest",
    "ExportResult",
    "ExportProjectionError",
    "ExportSerializationError",
    "ExportState",
    "ExportValidationError",
    "FileSystemDownloadSink",
    "ForeignLookup",
    "InMemoryDownloadSink",
    "JsonExporter",
    "NoColumnsSelectedError",
    "NoDataError",
    "ProjectedRow",
    "Raw",
    "SelectedColumn",
    "SelectionMismatchError",
    "TableSerializer",
    "TotalsUnsupportedError",
    "derived",
    "format_value",
    "lookup",
    "lookup_name",
    "numeric",
    "overall_summary",
    "pending",
    "percentage",
    "project",
    "project_all",
    "raw",
    "title_case",
]
