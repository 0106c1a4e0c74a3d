"""Application export – ExcelExporter."""
from __future__ import annotations

import io

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from hr_export.application.export.artifact import ExportArtifact

__all__ = ["ExcelExporter"]

SHEET_TITLE_LIMIT = 31


class ExcelExporter:
    """Exports an artifact to an .xlsx workbook using ``openpyxl``."""

    content_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def __init__(self, *, column_width: int = 20) -> None:
        self._column_width = column_width

    async def export(self, artifact: ExportArtifact) -> bytes:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = artifact.sheet_name[:SHEET_TITLE_LIMIT]

        ws.append(list(artifact.header))
        for cell in ws[1]:
            cell.font = Font(bold=True)

        for row in artifact.rows:
            ws.append(list(row))

        for col_idx in range(1, len(artifact.header) + 1):
            ws.column_dimensions[get_column_letter(col_idx)].width = self._column_width

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
