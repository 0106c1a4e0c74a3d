"""Application export – ColumnSpec, column kinds and ColumnSelection."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Iterator, Mapping

__all__ = [
    "ColumnKind",
    "ColumnSelection",
    "ColumnSpec",
    "Derived",
    "ForeignLookup",
    "Raw",
    "SelectedColumn",
    "derived",
    "lookup",
    "raw",
]


@dataclass(frozen=True)
class Raw:
    """Copy ``record[key]`` verbatim."""


@dataclass(frozen=True)
class Derived:
    """Compute the cell from the whole record."""

    compute: Callable[[Mapping[str, Any]], str] = field(compare=False)


@dataclass(frozen=True)
class ForeignLookup:
    """Resolve ``record[key]`` against the reference set named ``ref_set``."""

    ref_set: str


type ColumnKind = Raw | Derived | ForeignLookup


@dataclass(frozen=True)
class ColumnSpec:
    """Defines a single exportable column."""

    label: str        # header text, unique per export
    key: str          # lookup key into a raw record
    kind: ColumnKind = field(default_factory=Raw)

    @property
    def derived(self) -> bool:
        return isinstance(self.kind, Derived)


def raw(label: str, key: str) -> ColumnSpec:
    return ColumnSpec(label, key, Raw())


def derived(label: str, key: str, compute: Callable[[Mapping[str, Any]], str]) -> ColumnSpec:
    return ColumnSpec(label, key, Derived(compute))


def lookup(label: str, key: str, ref_set: str) -> ColumnSpec:
    return ColumnSpec(label, key, ForeignLookup(ref_set))


@dataclass(frozen=True)
class SelectedColumn:
    spec: ColumnSpec
    enabled: bool = True


@dataclass(frozen=True)
class ColumnSelection:
    """Ordered per-column include flags.

    Every revision is a new object; :meth:`toggle` and :meth:`set_all`
    never touch the selection they are called on.
    """

    entries: tuple[SelectedColumn, ...]

    def __post_init__(self) -> None:
        # projected rows are keyed by label, so a repeat would drop a cell
        seen: set[str] = set()
        for entry in self.entries:
            if entry.spec.label in seen:
                raise ValueError(f"duplicate column label {entry.spec.label!r}")
            seen.add(entry.spec.label)

    @classmethod
    def from_specs(cls, specs: Iterable[ColumnSpec]) -> ColumnSelection:
        """Initial state: every column enabled, in registry order."""
        return cls(tuple(SelectedColumn(spec) for spec in specs))

    def toggle(self, index: int) -> ColumnSelection:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"column index {index} out of range")
        entry = self.entries[index]
        flipped = replace(entry, enabled=not entry.enabled)
        return ColumnSelection(self.entries[:index] + (flipped,) + self.entries[index + 1:])

    def set_all(self, enabled: bool) -> ColumnSelection:
        return ColumnSelection(tuple(replace(entry, enabled=enabled) for entry in self.entries))

    def enabled_specs(self) -> tuple[ColumnSpec, ...]:
        return tuple(entry.spec for entry in self.entries if entry.enabled)

    def labels(self) -> tuple[str, ...]:
        """Header labels of the enabled columns, in registry order."""
        return tuple(spec.label for spec in self.enabled_specs())

    @property
    def has_enabled(self) -> bool:
        return any(entry.enabled for entry in self.entries)

    def __iter__(self) -> Iterator[SelectedColumn]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
