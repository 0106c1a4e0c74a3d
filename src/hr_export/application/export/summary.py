"""Application export – overall summary row."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from hr_export.application.export.derivations import numeric

__all__ = ["OVERALL_SUMMARY_LABEL", "overall_summary"]

OVERALL_SUMMARY_LABEL = "Overall Summary"


def overall_summary(
    records: Iterable[Mapping[str, Any]],
    summable: Iterable[str],
    *,
    label_key: str = "date",
    label: str = OVERALL_SUMMARY_LABEL,
) -> dict[str, Any]:
    """Return one synthetic record totalling *summable* fields across *records*.

    The result has the same shape as a source record, so derived columns
    (pending, percentages) are recomputed from the totals when projected.
    """
    rows = list(records)
    totals: dict[str, Any] = {label_key: label}
    for key in summable:
        totals[key] = sum(numeric(row, key) for row in rows)
    return totals
