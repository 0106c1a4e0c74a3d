"""Application notifications – tri-state progress reporting."""
from hr_export.application.notifications.notifier import InMemoryNotifier, LoggingNotifier, Notifier
from hr_export.application.notifications.outcome import ExportOutcome, Failure, Pending, Success
from hr_export.application.notifications.reporter import (
    NotificationReporter,
    ReportHandle,
    ReportMessages,
    default_error_render,
)

__all__ = [
    "ExportOutcome",
    "Failure",
    "InMemoryNotifier",
    "LoggingNotifier",
    "NotificationReporter",
    "Notifier",
    "Pending",
    "ReportHandle",
    "ReportMessages",
    "Success",
    "default_error_render",
]
