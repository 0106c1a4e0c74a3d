"""Application export – ExportArtifact."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from hr_export.application.export.projector import ProjectedRow

__all__ = ["ExportArtifact"]


@dataclass(frozen=True)
class ExportArtifact:
    """The finished table: one sheet, a header row and the data rows."""

    file_name: str
    sheet_name: str
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @classmethod
    def build(
        cls,
        *,
        file_name: str,
        sheet_name: str,
        header: Iterable[str],
        rows: Iterable[ProjectedRow],
    ) -> ExportArtifact:
        labels = tuple(header)
        return cls(
            file_name=file_name,
            sheet_name=sheet_name,
            header=labels,
            rows=tuple(tuple(row[label] for label in labels) for row in rows),
        )

    def records(self) -> Iterator[dict[str, str]]:
        """Rows as ``label -> value`` dicts, in header order."""
        for row in self.rows:
            yield dict(zip(self.header, row))

    def __len__(self) -> int:
        return len(self.rows)
