"""
hr_export – selective tabular export for the HR administration panel.

Import path convention::

    from hr_export.application.export import ExportOrchestrator, DAILY_WORKS
    from hr_export.application.notifications import NotificationReporter
    from hr_export.config import ExportSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
