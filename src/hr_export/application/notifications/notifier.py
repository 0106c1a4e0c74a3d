"""Application notifications – Notifier port, in-memory fake and logging adapter."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from hr_export.application.notifications.outcome import ExportOutcome, Failure, Pending, Success
from hr_export.observability.logging import get_logger

__all__ = ["InMemoryNotifier", "LoggingNotifier", "Notifier"]


@runtime_checkable
class Notifier(Protocol):
    """Port: render one notification state to the user."""

    def show(self, outcome: ExportOutcome) -> None: ...


class InMemoryNotifier:
    """Fake Notifier that captures every shown state."""

    def __init__(self) -> None:
        self.shown: list[ExportOutcome] = []

    def show(self, outcome: ExportOutcome) -> None:
        self.shown.append(outcome)

    def reset(self) -> None:
        self.shown.clear()

    @property
    def count(self) -> int:
        return len(self.shown)

    @property
    def last(self) -> ExportOutcome | None:
        return self.shown[-1] if self.shown else None


class LoggingNotifier:
    """Notifier that writes each state to the structured log."""

    def __init__(self, name: str = "hr_export.notifications") -> None:
        self._log = get_logger(name)

    def show(self, outcome: ExportOutcome) -> None:
        match outcome:
            case Pending(message=message):
                self._log.info("notification_pending", message=message)
            case Success(message=message):
                self._log.info("notification_success", message=message)
            case Failure(reason=reason):
                self._log.error("notification_error", reason=reason)
