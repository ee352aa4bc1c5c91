"""Write sinks: where rendered files end up.

``LocalFileSink`` writes to disk through ``asyncio.to_thread`` so the event
loop never blocks on file I/O.  ``MemorySink`` keeps writes in memory in the
order they happened, for embedding logigen in other tools and for tests.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from logigen.errors import WriteError


class WriteSink(Protocol):
    async def ensure_directory(self, path: Path) -> None: ...

    async def write_file(self, path: Path, content: str) -> None: ...

    async def exists(self, path: Path) -> bool: ...


class LocalFileSink:
    """Writes files to the local file system, overwriting existing files."""

    async def ensure_directory(self, path: Path) -> None:
        try:
            await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(path, exc) from exc

    async def write_file(self, path: Path, content: str) -> None:
        try:
            await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")
        except OSError as exc:
            raise WriteError(path, exc) from exc

    async def exists(self, path: Path) -> bool:
        try:
            return await asyncio.to_thread(Path(path).exists)
        except OSError as exc:
            raise WriteError(path, exc) from exc


class MemorySink:
    """Records directories and files instead of touching the disk."""

    def __init__(self) -> None:
        self.directories: list[Path] = []
        self.files: dict[Path, str] = {}
        self.order: list[Path] = []

    async def ensure_directory(self, path: Path) -> None:
        self.directories.append(Path(path))

    async def write_file(self, path: Path, content: str) -> None:
        self.files[Path(path)] = content
        self.order.append(Path(path))

    async def exists(self, path: Path) -> bool:
        return Path(path) in self.files
