"""Application notifications – NotificationReporter.

Shows a pending state as soon as an operation starts, then exactly one
success or error state when it settles::

    reporter = NotificationReporter(InMemoryNotifier())
    outcome = await reporter.report(
        do_export(),
        ReportMessages(
            pending_message="Exporting data to Excel ...",
            success_render=lambda msg: msg,
            error_render=lambda exc: str(exc),
        ),
    )
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from hr_export.application.notifications.notifier import Notifier
from hr_export.application.notifications.outcome import ExportOutcome, Failure, Pending, Success

__all__ = ["NotificationReporter", "ReportHandle", "ReportMessages", "default_error_render"]

T = TypeVar("T")


def default_error_render(error: BaseException) -> str:
    """Prefer the library error's plain ``message`` over its JSON ``str``."""
    return getattr(error, "message", None) or str(error)


@dataclass(frozen=True)
class ReportMessages(Generic[T]):
    """Texts and renderers for the three notification states."""

    pending_message: str
    success_render: Callable[[T], str] = str
    error_render: Callable[[BaseException], str] = default_error_render


class ReportHandle(Generic[T]):
    """One in-flight notification; settles at most once."""

    def __init__(self, notifier: Notifier, messages: ReportMessages[T]) -> None:
        self._notifier = notifier
        self._messages = messages
        self._outcome: ExportOutcome = Pending(messages.pending_message)
        notifier.show(self._outcome)

    @property
    def outcome(self) -> ExportOutcome:
        return self._outcome

    @property
    def settled(self) -> bool:
        return self._outcome.is_terminal

    def succeed(self, data: T) -> ExportOutcome:
        if self.settled:
            return self._outcome
        return self._settle(Success(self._messages.success_render(data)))

    def fail(self, error: BaseException) -> ExportOutcome:
        if self.settled:
            return self._outcome
        return self._settle(Failure(self._messages.error_render(error)))

    def _settle(self, outcome: ExportOutcome) -> ExportOutcome:
        self._outcome = outcome
        self._notifier.show(outcome)
        return outcome


class NotificationReporter:
    """Keys pending/success/error notifications to an awaitable's settlement."""

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def begin(self, messages: ReportMessages[Any]) -> ReportHandle[Any]:
        """Show the pending state now and return the handle to settle later."""
        return ReportHandle(self._notifier, messages)

    async def report(self, operation: Awaitable[T], messages: ReportMessages[T]) -> ExportOutcome:
        handle: ReportHandle[T] = ReportHandle(self._notifier, messages)
        try:
            data = await operation
        except Exception as exc:  # noqa: BLE001 – rendered as the error state
            return handle.fail(exc)
        return handle.succeed(data)
