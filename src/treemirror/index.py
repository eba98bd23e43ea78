"""Directory walking: turn a tree into a flat relative-path index."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator

from loguru import logger

from ._exclude import DEFAULT_IGNORE_NAME, ExcludeFilter
from .exceptions import MirrorIOError, NotFoundError


@dataclass
class TreeIndex:
    """Snapshot of one directory tree.

    Attributes:
        folders: Relative paths of every directory below the root.
        files: Relative path -> size in bytes for every regular file.

    Unpacks as ``folders, files = read_tree(root)``.
    """
    folders: set[str] = field(default_factory=set)
    files: dict[str, int] = field(default_factory=dict)

    def __iter__(self) -> Iterator:
        yield self.folders
        yield self.files

    @property
    def total_size(self) -> int:
        """Sum of the sizes of all indexed files."""
        return sum(self.files.values())


def read_tree(
    root: str,
    *,
    ignore_name: str | None = DEFAULT_IGNORE_NAME,
    exclude: ExcludeFilter | None = None,
) -> TreeIndex:
    """Index every directory and regular file under *root*.

    Paths are relative to *root* and use the platform separator; *root*
    itself is never recorded.  Directories named *ignore_name* are skipped
    along with everything below them.  Symbolic links are never recorded or
    followed, and special files (FIFOs, sockets, devices) are ignored.

    When *exclude* is given its ignore-name takes the place of
    *ignore_name* and its patterns are applied to every entry.

    Raises:
        NotFoundError: *root* does not exist or is not a directory.
        MirrorIOError: a directory could not be listed or an entry could
            not be stat-ed.  No partial index is returned.
    """
    if not os.path.isdir(root):
        raise NotFoundError(f"Directory not found: {root}")
    if exclude is None:
        exclude = ExcludeFilter(ignore_name=ignore_name)

    index = TreeIndex()
    _read_dir(root, "", exclude, index)
    logger.debug(
        f"Indexed {root}: {len(index.folders)} folders, {len(index.files)} files"
    )
    return index


def _read_dir(path: str, rel_dir: str, exclude: ExcludeFilter, index: TreeIndex) -> None:
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as exc:
        raise MirrorIOError("read", path, exc) from exc

    for entry in entries:
        rel = os.path.join(rel_dir, entry.name) if rel_dir else entry.name
        try:
            if entry.is_symlink():
                continue
            if entry.is_dir(follow_symlinks=False):
                if exclude.is_excluded(rel, is_dir=True):
                    logger.debug(f"Skipping excluded directory {rel}")
                    continue
                index.folders.add(rel)
                _read_dir(entry.path, rel, exclude, index)
            elif entry.is_file(follow_symlinks=False):
                if exclude.is_excluded(rel):
                    continue
                index.files[rel] = entry.stat(follow_symlinks=False).st_size
        except OSError as exc:
            raise MirrorIOError("read", entry.path, exc) from exc
