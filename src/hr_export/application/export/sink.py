"""Application export – DownloadSink port and adapters."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, runtime_checkable

__all__ = ["DownloadSink", "FileSystemDownloadSink", "InMemoryDownloadSink"]


@runtime_checkable
class DownloadSink(Protocol):
    """Port: hand a finished file to the user; returns where it went."""

    async def deliver(self, file_name: str, data: bytes, content_type: str) -> str: ...


class FileSystemDownloadSink:
    """Writes downloads into a directory, overwriting same-named files."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def deliver(self, file_name: str, data: bytes, content_type: str) -> str:  # noqa: ARG002
        target = self._directory / Path(file_name).name
        await asyncio.to_thread(self._write, target, data)
        return str(target)

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)


class InMemoryDownloadSink:
    """Fake DownloadSink for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self._content_types: dict[str, str] = {}

    async def deliver(self, file_name: str, data: bytes, content_type: str) -> str:
        self._files[file_name] = data
        self._content_types[file_name] = content_type
        return f"memory://{file_name}"

    def get(self, file_name: str) -> bytes | None:
        return self._files.get(file_name)

    def content_type(self, file_name: str) -> str | None:
        return self._content_types.get(file_name)

    @property
    def count(self) -> int:
        return len(self._files)
