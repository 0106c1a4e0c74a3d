"""Application export – derived column values.

Every function here is pure and never raises on missing input; the
projector relies on that to keep one bad record from aborting an export.
"""
from __future__ import annotations

import math
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Mapping

__all__ = [
    "NOT_AVAILABLE",
    "format_value",
    "lookup_name",
    "numeric",
    "pending",
    "percentage",
    "title_case",
]

NOT_AVAILABLE = "N/A"

Number = int | float


def pending(total: Number, completed: Number) -> str:
    """Work still open: ``total - completed``, or ``"0"`` when nothing was planned."""
    if total > 0:
        return str(int(total - completed))
    return "0"


def percentage(numerator: Number, total: Number) -> str:
    """``numerator`` as a share of ``total`` with one decimal, e.g. ``"40.0%"``."""
    if total > 0:
        return f"{numerator / total * 100:.1f}%"
    return "0%"


def lookup_name(identifier: Any, references: Iterable[Mapping[str, Any]] | None) -> str:
    """Resolve *identifier* to the ``name`` of the first entry with that ``id``.

    Unknown ids, ``None`` ids and entries without a name all give ``"N/A"``.
    """
    if identifier is None or references is None:
        return NOT_AVAILABLE
    for entry in references:
        if entry.get("id") == identifier:
            name = entry.get("name")
            return NOT_AVAILABLE if name is None else str(name)
    return NOT_AVAILABLE


def title_case(value: str) -> str:
    """Upper-case the first character only (``"in_progress"`` -> ``"In_progress"``)."""
    if not value:
        return value
    return value[0].upper() + value[1:]


def numeric(record: Mapping[str, Any], key: str) -> Number:
    """Read a count off *record*.

    Absent, empty, unparseable and non-finite values count as 0. ``Decimal``
    and other real numbers come back as ``float`` so fractional counts
    survive.
    """
    value = record.get(key)
    if value is None or value == "" or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if not isinstance(value, (Real, Decimal)):
        try:
            return int(value)
        except (TypeError, ValueError):
            pass
    try:
        return _finite(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _finite(value: float) -> Number:
    return value if math.isfinite(value) else 0


def format_value(value: Any) -> str:
    """Cell text for a raw value; ``None`` becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
