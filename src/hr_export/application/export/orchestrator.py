"""Application export – ExportOrchestrator.

Runs one export per call through ``IDLE -> VALIDATING -> PROJECTING ->
SERIALIZING -> DONE`` and reports the outcome through a
:class:`NotificationReporter`.  Every failure ends in ``DONE`` with a
:class:`Failure` outcome; the dialog is closed only on :class:`Success`.
"""
from __future__ import annotations

from dataclasses import replace
from enum import StrEnum
from typing import Callable

from hr_export.application.export.artifact import ExportArtifact
from hr_export.application.export.errors import (
    ExportProjectionError,
    ExportSerializationError,
    ExportValidationError,
    NoColumnsSelectedError,
    NoDataError,
    SelectionMismatchError,
    TotalsUnsupportedError,
)
from hr_export.application.export.export_service import TableSerializer
from hr_export.application.export.projector import project_all
from hr_export.application.export.request import ExportRequest, ExportResult
from hr_export.application.export.sink import FileSystemDownloadSink
from hr_export.application.export.summary import overall_summary
from hr_export.application.notifications import (
    ExportOutcome,
    NotificationReporter,
    Notifier,
    ReportMessages,
    Success,
)
from hr_export.config.settings import ExportSettings
from hr_export.observability.logging import get_logger

__all__ = ["ExportOrchestrator", "ExportState"]

logger = get_logger(__name__)


class ExportState(StrEnum):
    IDLE = "idle"
    VALIDATING = "validating"
    PROJECTING = "projecting"
    SERIALIZING = "serializing"
    DONE = "done"


class ExportOrchestrator:
    """Owns one download dialog's export flow.

    At most one export should run at a time; callers disable the trigger
    while :attr:`busy` is true.
    """

    def __init__(
        self,
        reporter: NotificationReporter,
        serializer: TableSerializer,
        *,
        settings: ExportSettings | None = None,
        close_dialog: Callable[[], None] | None = None,
    ) -> None:
        self._reporter = reporter
        self._serializer = serializer
        self._settings = settings or ExportSettings()
        self._close_dialog = close_dialog
        self._state = ExportState.IDLE
        self._outcome: ExportOutcome | None = None
        self.history: list[ExportState] = [ExportState.IDLE]

    @classmethod
    def from_settings(
        cls,
        settings: ExportSettings,
        notifier: Notifier,
        *,
        close_dialog: Callable[[], None] | None = None,
    ) -> ExportOrchestrator:
        """Wire a reporter and a filesystem sink rooted at ``settings.output_dir``."""
        serializer = TableSerializer(
            FileSystemDownloadSink(settings.output_dir),
            column_width=settings.column_width,
        )
        return cls(
            NotificationReporter(notifier),
            serializer,
            settings=settings,
            close_dialog=close_dialog,
        )

    @property
    def state(self) -> ExportState:
        return self._state

    @property
    def outcome(self) -> ExportOutcome | None:
        """Terminal outcome of the last export, ``None`` before the first."""
        return self._outcome

    @property
    def busy(self) -> bool:
        return self._state not in (ExportState.IDLE, ExportState.DONE)

    async def export(self, request: ExportRequest) -> ExportOutcome:
        # records are copied; the caller's sequence and mappings are never touched
        snapshot = replace(request, records=tuple(dict(record) for record in request.records))
        self.history = []
        self._outcome = None
        messages: ReportMessages[ExportResult] = ReportMessages(
            pending_message=self._settings.pending_message,
            success_render=lambda _result: self._settings.success_message,
        )
        try:
            outcome = await self._reporter.report(self._run(snapshot), messages)
        finally:
            self._transition(ExportState.DONE)
        self._outcome = outcome
        if isinstance(outcome, Success) and self._close_dialog is not None:
            self._close_dialog()
        return outcome

    async def _run(self, request: ExportRequest) -> ExportResult:
        fmt = request.format or self._settings.default_format
        log = logger.bind(profile=request.profile.name, format=fmt)
        self._transition(ExportState.VALIDATING)
        log.info("export_started", records=len(request.records))
        try:
            self._validate(request)
        except ExportValidationError as exc:
            log.warning("export_rejected", code=exc.code, reason=exc.message)
            raise

        self._transition(ExportState.PROJECTING)
        try:
            rows = project_all(request.records, request.selection, request.references)
            if request.totals_row:
                totals = overall_summary(
                    request.records,
                    request.profile.summable,
                    label_key=request.profile.summary_label_key,
                )
                rows.extend(project_all([totals], request.selection, request.references))
        except Exception as exc:
            log.error("export_failed", phase=ExportState.PROJECTING.value, exc_info=True)
            raise ExportProjectionError(exc) from exc

        self._transition(ExportState.SERIALIZING)
        artifact = ExportArtifact.build(
            file_name=request.profile.file_name(fmt),
            sheet_name=request.profile.sheet_name,
            header=request.selection.labels(),
            rows=rows,
        )
        try:
            location = await self._serializer.write(artifact, fmt)
        except Exception as exc:
            log.error(
                "export_failed",
                phase=ExportState.SERIALIZING.value,
                file_name=artifact.file_name,
                exc_info=True,
            )
            raise ExportSerializationError(exc, payload_type=fmt) from exc

        log.info(
            "export_completed",
            rows=len(artifact),
            columns=len(artifact.header),
            location=location,
        )
        return ExportResult(
            file_name=artifact.file_name,
            location=location,
            format=fmt,
            row_count=len(artifact),
            column_count=len(artifact.header),
        )

    @staticmethod
    def _validate(request: ExportRequest) -> None:
        if not request.selection.has_enabled:
            raise NoColumnsSelectedError()
        if tuple(entry.spec for entry in request.selection) != request.profile.columns:
            raise SelectionMismatchError(request.profile.name)
        if not request.records:
            raise NoDataError()
        if request.totals_row and not request.profile.supports_totals:
            raise TotalsUnsupportedError(request.profile.name)

    def _transition(self, state: ExportState) -> None:
        self._state = state
        self.history.append(state)
