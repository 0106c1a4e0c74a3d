"""Application export – TableSerializer dispatches to the right exporter."""
from __future__ import annotations

from typing import Literal, Protocol

from hr_export.application.export.artifact import ExportArtifact
from hr_export.application.export.csv_export import CsvExporter
from hr_export.application.export.excel_export import ExcelExporter
from hr_export.application.export.json_export import JsonExporter
from hr_export.application.export.sink import DownloadSink

__all__ = ["ExportFormat", "Exporter", "TableSerializer"]

type ExportFormat = Literal["xlsx", "csv", "json"]


class Exporter(Protocol):
    content_type: str

    async def export(self, artifact: ExportArtifact) -> bytes: ...


class TableSerializer:
    """Serializes an artifact in the requested format and delivers the file."""

    def __init__(self, sink: DownloadSink, *, column_width: int = 20, bom: bool = False) -> None:
        self._sink = sink
        self._exporters: dict[str, Exporter] = {
            "xlsx": ExcelExporter(column_width=column_width),
            "csv": CsvExporter(bom=bom),
            "json": JsonExporter(),
        }

    @property
    def formats(self) -> tuple[str, ...]:
        return tuple(self._exporters)

    async def write(self, artifact: ExportArtifact, fmt: ExportFormat = "xlsx") -> str:
        """Serialize *artifact* and return the sink's location for the file."""
        exporter = self._exporters.get(fmt)
        if exporter is None:
            raise ValueError(f"Unsupported export format: {fmt!r}")
        data = await exporter.export(artifact)
        return await self._sink.deliver(artifact.file_name, data, exporter.content_type)
