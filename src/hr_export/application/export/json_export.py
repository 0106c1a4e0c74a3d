"""Application export – JsonExporter."""
from __future__ import annotations

import json

from hr_export.application.export.artifact import ExportArtifact

__all__ = ["JsonExporter"]


class JsonExporter:
    """Writes an artifact as a pretty-printed JSON array of row objects."""

    content_type = "application/json"

    async def export(self, artifact: ExportArtifact) -> bytes:
        return json.dumps(list(artifact.records()), indent=2, ensure_ascii=False).encode("utf-8")
