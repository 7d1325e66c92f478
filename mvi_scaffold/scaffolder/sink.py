"""File sinks: the terminal step that persists rendered files.

A sink overwrites silently when the file already exists.  ``LocalFileSink``
writes to disk and reports failures as :class:`FileSinkError`;
``MemoryFileSink`` records what would have been written.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol

from .packages import DirectoryHandle, MemoryDirectory


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FileSinkError(Exception):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path}: {message}")


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------


class FileSink(Protocol):
    def write(self, directory: DirectoryHandle, file_name: str, content: str) -> None: ...


class LocalFileSink:
    """Writes UTF-8 text files into local directories."""

    def write(self, directory: DirectoryHandle, file_name: str, content: str) -> None:
        target = Path(directory.path) / file_name
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileSinkError(target.as_posix(), exc.strerror or str(exc)) from exc


class MemoryFileSink:
    """Records every write in :attr:`written`, keyed by full path, in write order."""

    def __init__(self) -> None:
        self.written: dict[str, str] = {}

    def write(self, directory: DirectoryHandle, file_name: str, content: str) -> None:
        if isinstance(directory, MemoryDirectory):
            directory.files[file_name] = content
        self.written[str(PurePosixPath(directory.path) / file_name)] = content
