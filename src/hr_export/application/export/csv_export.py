"""Application export – CsvExporter."""
from __future__ import annotations

import csv
import io

from hr_export.application.export.artifact import ExportArtifact

__all__ = ["CsvExporter"]


class CsvExporter:
    """Writes an artifact as RFC 4180 CSV, one line per row under the header.

    With ``bom=True`` the payload is encoded as ``utf-8-sig`` so Excel picks
    up the encoding when the download is opened directly.
    """

    content_type = "text/csv; charset=utf-8"

    def __init__(self, *, delimiter: str = ",", bom: bool = False) -> None:
        self._delimiter = delimiter
        self._encoding = "utf-8-sig" if bom else "utf-8"

    async def export(self, artifact: ExportArtifact) -> bytes:
        buf = io.StringIO(newline="")
        writer = csv.DictWriter(
            buf,
            fieldnames=artifact.header,
            delimiter=self._delimiter,
            lineterminator="\r\n",
        )
        writer.writeheader()
        writer.writerows(artifact.records())
        return buf.getvalue().encode(self._encoding)
