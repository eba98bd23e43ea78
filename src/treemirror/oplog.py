"""Append-only operation log.

The log file holds one section per operation category, each a header line
followed by one completed path per line.  Sections are separated by a blank
line.  The file is truncated at the start of every run, so after a failure
it lists exactly what completed.

Paths are written back in their on-disk byte form: names that are not valid
UTF-8 round-trip through ``surrogateescape``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import IO, Iterator

from .exceptions import MirrorIOError

DEFAULT_LOG_FILE = "log"

LOG_MADE_FOLDERS = "directories made: (if a folder had some parent directories, they were also created)"
LOG_CLEANED_FOLDERS = "directories removed: (if a folder had some subdirectories, they were also removed)"
LOG_COPIED_FILES = "files copied:"
LOG_CLEANED_FILES = "files removed:"


class SectionWriter:
    """Writes completed paths into one open log section."""

    def __init__(self, f: IO[str], path: str) -> None:
        self._f = f
        self._path = path

    def write(self, line: str) -> None:
        try:
            self._f.write(line + "\n")
            self._f.flush()
        except OSError as exc:
            raise MirrorIOError("log", self._path, exc) from exc


class OperationLog:
    """The run's log file at *path*."""

    def __init__(self, path: str = DEFAULT_LOG_FILE) -> None:
        self.path = path

    def truncate(self) -> None:
        """Empty the log file, creating it if needed."""
        try:
            with open(self.path, "w", encoding="utf-8", errors="surrogateescape"):
                pass
        except OSError as exc:
            raise MirrorIOError("log", self.path, exc) from exc

    @contextmanager
    def section(self, header: str) -> Iterator[SectionWriter]:
        """Open a new section headed by *header* and yield its writer."""
        try:
            f = open(self.path, "a", encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise MirrorIOError("log", self.path, exc) from exc
        with f:
            writer = SectionWriter(f, self.path)
            try:
                if os.fstat(f.fileno()).st_size:
                    f.write("\n")
            except OSError as exc:
                raise MirrorIOError("log", self.path, exc) from exc
            writer.write(header)
            yield writer
