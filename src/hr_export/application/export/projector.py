"""Application export – Row projector.

Maps one raw record to an ordered ``label -> text`` row holding exactly the
enabled columns of a :class:`ColumnSelection`.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from hr_export.application.export.columns import ColumnSelection, ColumnSpec, Derived, ForeignLookup
from hr_export.application.export.derivations import format_value, lookup_name

__all__ = ["ProjectedRow", "References", "project", "project_all"]

type ProjectedRow = dict[str, str]
type References = Mapping[str, Sequence[Mapping[str, Any]]]


def _resolve(spec: ColumnSpec, record: Mapping[str, Any], references: References) -> str:
    match spec.kind:
        case Derived(compute=compute):
            return format_value(compute(record))
        case ForeignLookup(ref_set=ref_set):
            return lookup_name(record.get(spec.key), references.get(ref_set))
        case _:
            return format_value(record.get(spec.key))


def project(
    record: Mapping[str, Any],
    selection: ColumnSelection,
    references: References | None = None,
) -> ProjectedRow:
    refs = references if references is not None else {}
    return {spec.label: _resolve(spec, record, refs) for spec in selection.enabled_specs()}


def project_all(
    records: Iterable[Mapping[str, Any]],
    selection: ColumnSelection,
    references: References | None = None,
) -> list[ProjectedRow]:
    """Project every record, keeping input order."""
    return [project(record, selection, references) for record in records]
