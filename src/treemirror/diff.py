"""Set differences between two tree indexes.

A source file and a destination file at the same relative path are treated
as identical when their sizes are equal.  Content is never read.

Every function takes ``(dst, src)``, returns a new container and leaves its
arguments untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Mapping

from .index import TreeIndex


def missing_folders(dst: AbstractSet[str], src: AbstractSet[str]) -> set[str]:
    """Return directories present in *src* but not in *dst*."""
    return {folder for folder in src if folder not in dst}


def folders_to_clean(dst: AbstractSet[str], src: AbstractSet[str]) -> set[str]:
    """Return directories present in *dst* but not in *src*."""
    return {folder for folder in dst if folder not in src}


def missing_files(dst: Mapping[str, int], src: Mapping[str, int]) -> tuple[dict[str, int], int]:
    """Return files of *src* that are absent from *dst* or differ in size.

    Returns ``(files, total_size)`` where sizes are the ones recorded in
    *src* and *total_size* is their sum.
    """
    result: dict[str, int] = {}
    total_size = 0
    for path, size in src.items():
        if dst.get(path) != size:
            result[path] = size
            total_size += size
    return result, total_size


def files_to_clean(dst: Mapping[str, int], src: Mapping[str, int]) -> tuple[dict[str, int], int]:
    """Return files of *dst* that are absent from *src*.

    Returns ``(files, total_size)`` with sizes taken from *dst*.
    """
    result: dict[str, int] = {}
    total_size = 0
    for path, size in dst.items():
        if path not in src:
            result[path] = size
            total_size += size
    return result, total_size


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------

@dataclass
class MirrorDiff:
    """Work needed to bring a destination in line with a source.

    Attributes:
        folders: Directories to create (copy mode) or remove (clean mode).
        files: Files to copy or remove, with their recorded sizes.
        total_size: Sum of ``files`` sizes, computed once at diff time.
        clean: ``True`` for clean mode.
    """
    folders: set[str] = field(default_factory=set)
    files: dict[str, int] = field(default_factory=dict)
    total_size: int = 0
    clean: bool = False

    @property
    def in_sync(self) -> bool:
        """``True`` if there is nothing to create, copy or remove."""
        return not self.folders and not self.files

    @property
    def total(self) -> int:
        """Number of folders plus number of files."""
        return len(self.folders) + len(self.files)


def compute_diff(dst: TreeIndex, src: TreeIndex, *, clean: bool = False) -> MirrorDiff:
    """Diff two indexes for copy mode, or for clean mode when *clean* is set."""
    if clean:
        folders = folders_to_clean(dst.folders, src.folders)
        files, total_size = files_to_clean(dst.files, src.files)
    else:
        folders = missing_folders(dst.folders, src.folders)
        files, total_size = missing_files(dst.files, src.files)
    return MirrorDiff(folders=folders, files=files, total_size=total_size, clean=clean)
