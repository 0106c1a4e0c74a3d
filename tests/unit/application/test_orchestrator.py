"""Unit tests for Application — ExportOrchestrator."""
from __future__ import annotations

import asyncio
import copy
import io

import openpyxl
import pytest
from structlog.testing import capture_logs

from hr_export.application.export import (
    DAILY_WORKS,
    DAILY_WORK_SUMMARY,
    ExportOrchestrator,
    ExportProfile,
    ExportRequest,
    ExportState,
    InMemoryDownloadSink,
    OVERALL_SUMMARY_LABEL,
    TableSerializer,
    derived,
    raw,
)
from hr_export.application.notifications import (
    Failure,
    InMemoryNotifier,
    NotificationReporter,
    Pending,
    Success,
)
from hr_export.config import ExportSettings


SUMMARY_RECORDS = [
    {"date": "2024-01-01", "totalDailyWorks": 10, "completed": 4, "rfiSubmissions": 2},
    {"date": "2024-01-02", "totalDailyWorks": 5, "completed": 5, "rfiSubmissions": 5},
]
USERS = [{"id": 1, "name": "Alice"}]


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------
class SpySerializer(TableSerializer):
    def __init__(self, sink) -> None:
        super().__init__(sink)
        self.calls = 0

    async def write(self, artifact, fmt="xlsx"):
        self.calls += 1
        return await super().write(artifact, fmt)


class BrokenSink:
    async def deliver(self, file_name, data, content_type):
        raise OSError("disk full")


class Harness:
    def __init__(self, sink=None, settings=None) -> None:
        self.sink = sink if sink is not None else InMemoryDownloadSink()
        self.notifier = InMemoryNotifier()
        self.serializer = SpySerializer(self.sink)
        self.closed = 0
        self.orchestrator = ExportOrchestrator(
            NotificationReporter(self.notifier),
            self.serializer,
            settings=settings,
            close_dialog=self._close,
        )

    def _close(self) -> None:
        self.closed += 1

    def run(self, request: ExportRequest):
        return asyncio.run(self.orchestrator.export(request))


def _summary_request(**kwargs) -> ExportRequest:
    kwargs.setdefault("selection", DAILY_WORK_SUMMARY.selection())
    kwargs.setdefault("records", SUMMARY_RECORDS)
    return ExportRequest(profile=DAILY_WORK_SUMMARY, **kwargs)


def _rows(data: bytes):
    wb = openpyxl.load_workbook(io.BytesIO(data))
    return wb, list(wb.active.iter_rows(values_only=True))


# ---------------------------------------------------------------------------
# Success path
# ---------------------------------------------------------------------------
class TestSuccessfulExport:
    def test_outcome_and_state(self):
        h = Harness()
        outcome = h.run(_summary_request())
        assert outcome == Success("Export successful!")
        assert h.orchestrator.state is ExportState.DONE
        assert h.orchestrator.outcome == outcome
        assert h.orchestrator.history == [
            ExportState.VALIDATING,
            ExportState.PROJECTING,
            ExportState.SERIALIZING,
            ExportState.DONE,
        ]

    def test_closes_dialog(self):
        h = Harness()
        h.run(_summary_request())
        assert h.closed == 1

    def test_notifications_pending_then_success(self):
        h = Harness()
        h.run(_summary_request())
        assert h.notifier.shown == [Pending("Exporting data to Excel ..."), Success("Export successful!")]

    def test_workbook_content(self):
        h = Harness()
        h.run(_summary_request())
        wb, rows = _rows(h.sink.get("DailyWorkSummary.xlsx"))
        assert wb.sheetnames == ["Daily Work Summary"]
        assert rows[0] == DAILY_WORK_SUMMARY.selection().labels()
        assert len(rows) == 1 + len(SUMMARY_RECORDS)
        first = dict(zip(rows[0], rows[1]))
        assert first["Pending"] == "6"
        assert first["Completion Percentage"] == "40.0%"
        assert first["RFI Submission Percentage"] == "20.0%"
        assert rows[2][0] == "2024-01-02"

    def test_header_respects_selection(self):
        h = Harness()
        selection = DAILY_WORK_SUMMARY.selection().set_all(False).toggle(0).toggle(7)
        h.run(_summary_request(selection=selection))
        _, rows = _rows(h.sink.get("DailyWorkSummary.xlsx"))
        assert rows == [("Date", "Pending"), ("2024-01-01", "6"), ("2024-01-02", "0")]

    def test_daily_works_lookup(self):
        h = Harness()
        records = [{"date": "2024-03-01", "number": "RFI-9", "status": "new", "assigned": 1, "incharge": 2}]
        h.run(ExportRequest(DAILY_WORKS, DAILY_WORKS.selection(), records, {"users": USERS}))
        _, rows = _rows(h.sink.get("DailyWorks.xlsx"))
        row = dict(zip(rows[0], rows[1]))
        assert row["Status"] == "New"
        assert row["Assigned"] == "Alice"
        assert row["In charge"] == "N/A"

    def test_csv_format(self):
        h = Harness()
        h.run(_summary_request(format="csv"))
        lines = h.sink.get("DailyWorkSummary.csv").decode("utf-8").splitlines()
        assert lines[0].startswith("Date,Total Daily Works")
        assert len(lines) == 3

    def test_default_format_from_settings(self):
        h = Harness(settings=ExportSettings(default_format="json"))
        h.run(_summary_request())
        assert h.sink.get("DailyWorkSummary.json") is not None

    def test_custom_messages_from_settings(self):
        h = Harness(settings=ExportSettings(pending_message="Working", success_message="Done!"))
        outcome = h.run(_summary_request())
        assert outcome == Success("Done!")
        assert h.notifier.shown[0] == Pending("Working")

    def test_records_not_mutated(self):
        records = copy.deepcopy(SUMMARY_RECORDS)
        h = Harness()
        h.run(_summary_request(records=records, totals_row=True))
        assert records == SUMMARY_RECORDS

    def test_logs_completion(self):
        h = Harness()
        with capture_logs() as logs:
            h.run(_summary_request())
        events = [entry["event"] for entry in logs]
        assert "export_started" in events
        completed = next(entry for entry in logs if entry["event"] == "export_completed")
        assert completed["rows"] == 2
        assert completed["columns"] == 11


# ---------------------------------------------------------------------------
# Totals row
# ---------------------------------------------------------------------------
class TestTotalsRow:
    def test_appends_overall_summary(self):
        h = Harness()
        h.run(_summary_request(totals_row=True))
        _, rows = _rows(h.sink.get("DailyWorkSummary.xlsx"))
        assert len(rows) == 4
        totals = dict(zip(rows[0], rows[-1]))
        assert totals["Date"] == OVERALL_SUMMARY_LABEL
        assert totals["Total Daily Works"] == "15"
        assert totals["Completed"] == "9"
        assert totals["Pending"] == "6"
        assert totals["Completion Percentage"] == "60.0%"
        assert totals["RFI Submission Percentage"] == "46.7%"

    def test_unsupported_profile_fails(self):
        h = Harness()
        records = [{"date": "2024-03-01"}]
        outcome = h.run(ExportRequest(DAILY_WORKS, DAILY_WORKS.selection(), records, totals_row=True))
        assert isinstance(outcome, Failure)
        assert h.serializer.calls == 0


# ---------------------------------------------------------------------------
# Validation failures
# ---------------------------------------------------------------------------
class TestValidationFailures:
    def test_no_columns_selected(self):
        h = Harness()
        outcome = h.run(_summary_request(selection=DAILY_WORK_SUMMARY.selection().set_all(False)))
        assert outcome == Failure("No columns selected for export.")
        assert h.serializer.calls == 0
        assert h.closed == 0
        assert ExportState.PROJECTING not in h.orchestrator.history
        assert h.orchestrator.state is ExportState.DONE

    def test_no_data(self):
        h = Harness()
        outcome = h.run(_summary_request(records=[]))
        assert outcome == Failure("No data available for export.")
        assert h.serializer.calls == 0
        assert h.orchestrator.history == [ExportState.VALIDATING, ExportState.DONE]

    def test_no_columns_checked_before_no_data(self):
        h = Harness()
        outcome = h.run(_summary_request(selection=DAILY_WORK_SUMMARY.selection().set_all(False), records=[]))
        assert outcome == Failure("No columns selected for export.")

    def test_rejection_logged(self):
        h = Harness()
        with capture_logs() as logs:
            h.run(_summary_request(records=[]))
        rejected = next(entry for entry in logs if entry["event"] == "export_rejected")
        assert rejected["code"] == "no_data"

    def test_selection_from_another_profile(self):
        h = Harness()
        outcome = h.run(_summary_request(selection=DAILY_WORKS.selection()))
        assert outcome == Failure("Column selection does not match the 'Daily Work Summary' export.")
        assert h.serializer.calls == 0
        assert h.closed == 0
        assert h.orchestrator.history == [ExportState.VALIDATING, ExportState.DONE]

    def test_mismatch_logged_with_code(self):
        h = Harness()
        with capture_logs() as logs:
            h.run(_summary_request(selection=DAILY_WORKS.selection()))
        rejected = next(entry for entry in logs if entry["event"] == "export_rejected")
        assert rejected["code"] == "selection_mismatch"


# ---------------------------------------------------------------------------
# Serialization failures
# ---------------------------------------------------------------------------
class TestSerializationFailure:
    def test_cause_surfaces_in_reason(self):
        h = Harness(sink=BrokenSink())
        outcome = h.run(_summary_request())
        assert isinstance(outcome, Failure)
        assert not isinstance(outcome, Success)
        assert "disk full" in outcome.reason
        assert h.orchestrator.outcome == outcome
        assert h.closed == 0

    def test_notifier_shows_error_once(self):
        h = Harness(sink=BrokenSink())
        h.run(_summary_request())
        assert h.notifier.count == 2
        assert isinstance(h.notifier.last, Failure)

    def test_failure_logged_with_traceback(self):
        h = Harness(sink=BrokenSink())
        with capture_logs() as logs:
            h.run(_summary_request())
        failed = next(entry for entry in logs if entry["event"] == "export_failed")
        assert failed["exc_info"] is True
        assert failed["log_level"] == "error"

    def test_illegal_cell_content(self):
        h = Harness()
        records = [{"date": "bad\x01date", "totalDailyWorks": 1}]
        outcome = h.run(_summary_request(records=records))
        assert isinstance(outcome, Failure)
        assert outcome.reason.startswith("Failed to export data:")

    def test_retry_after_failure(self):
        h = Harness()
        assert isinstance(h.run(_summary_request(records=[])), Failure)
        assert h.run(_summary_request()) == Success("Export successful!")
        assert h.closed == 1


# ---------------------------------------------------------------------------
# Projection failures
# ---------------------------------------------------------------------------
def _explode(record):
    raise RuntimeError(f"cannot derive {record['date']}")


EXPLODING = ExportProfile(
    name="Exploding",
    file_stem="Exploding",
    sheet_name="Exploding",
    columns=(raw("Date", "date"), derived("Broken", "broken", _explode)),
)


class TestProjectionFailure:
    def _run(self, h):
        return h.run(ExportRequest(EXPLODING, EXPLODING.selection(), SUMMARY_RECORDS))

    def test_reported_as_failure(self):
        h = Harness()
        outcome = self._run(h)
        assert outcome == Failure("Failed to export data: cannot derive 2024-01-01")
        assert h.orchestrator.state is ExportState.DONE
        assert h.orchestrator.history == [
            ExportState.VALIDATING,
            ExportState.PROJECTING,
            ExportState.DONE,
        ]

    def test_serializer_skipped_and_dialog_kept(self):
        h = Harness()
        self._run(h)
        assert h.serializer.calls == 0
        assert h.closed == 0
        assert h.notifier.count == 2

    def test_logged_with_traceback(self):
        h = Harness()
        with capture_logs() as logs:
            self._run(h)
        failed = next(entry for entry in logs if entry["event"] == "export_failed")
        assert failed["phase"] == "projecting"
        assert failed["exc_info"] is True

    def test_non_finite_counts_still_export(self):
        h = Harness()
        records = [{"date": "2024-01-01", "totalDailyWorks": "inf", "completed": float("nan")}]
        outcome = h.run(_summary_request(records=records, totals_row=True))
        assert outcome == Success("Export successful!")
        _, rows = _rows(h.sink.get("DailyWorkSummary.xlsx"))
        first = dict(zip(rows[0], rows[1]))
        assert first["Pending"] == "0"
        assert first["Completion Percentage"] == "0%"


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------
class TestFromSettings:
    def test_writes_into_output_dir(self, tmp_path):
        notifier = InMemoryNotifier()
        orchestrator = ExportOrchestrator.from_settings(
            ExportSettings(output_dir=str(tmp_path)),
            notifier,
        )
        outcome = asyncio.run(orchestrator.export(_summary_request()))
        assert outcome == Success("Export successful!")
        assert (tmp_path / "DailyWorkSummary.xlsx").exists()

    def test_not_busy_when_idle_or_done(self):
        h = Harness()
        assert h.orchestrator.state is ExportState.IDLE
        assert h.orchestrator.busy is False
        h.run(_summary_request())
        assert h.orchestrator.busy is False


@pytest.mark.parametrize("fmt", ["xlsx", "csv", "json"])
def test_file_name_matches_format(fmt):
    h = Harness()
    h.run(_summary_request(format=fmt))
    assert h.sink.get(f"DailyWorkSummary.{fmt}") is not None
