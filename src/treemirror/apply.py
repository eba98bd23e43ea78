"""Apply a diff to disk: make/remove folders, copy/remove files.

Each function works through one category sequentially, writes one log
section and drives its own :class:`ProgressReporter`.  The first
:class:`OSError` aborts the category as a :class:`MirrorIOError`; paths
logged before that point did complete.
"""

from __future__ import annotations

import errno
import os
import shutil
from typing import AbstractSet, Mapping

from loguru import logger

from .exceptions import MirrorIOError
from .oplog import (
    LOG_CLEANED_FILES,
    LOG_CLEANED_FOLDERS,
    LOG_COPIED_FILES,
    LOG_MADE_FOLDERS,
    OperationLog,
)
from .order import creation_order, deletion_order, sorted_paths
from .progress import DEFAULT_STEP, ProgressCallback, ProgressReporter

FOLDER_PERM = 0o755

MSG_PROGRESS_MAKING_FOLDERS = "making folders:"
MSG_PROGRESS_CLEANING_FOLDERS = "removing folders:"
MSG_PROGRESS_COPYING_FILES = "copying files:"
MSG_PROGRESS_CLEANING_FILES = "removing files:"

ERR_SYMLINK = "refusing to write through a symbolic link"


def _symlink_on_path(root: str, rel: str) -> str | None:
    """Return the first symbolic link met walking from *root* down to *rel*.

    Symlinks are invisible to the index, so a destination path can look
    missing while a link sits on it or on one of its parents.
    """
    path = root
    for part in rel.split(os.sep):
        path = os.path.join(path, part)
        if os.path.islink(path):
            return path
    return None


def _refuse_symlink(operation: str, root: str, rel: str) -> None:
    link = _symlink_on_path(root, rel)
    if link is not None:
        raise MirrorIOError(operation, link, OSError(errno.ELOOP, ERR_SYMLINK, link))


# ---------------------------------------------------------------------------
# Folders
# ---------------------------------------------------------------------------

def make_folders(
    folders: AbstractSet[str], root: str, *,
    log: OperationLog,
    on_progress: ProgressCallback | None = None,
    step: int = DEFAULT_STEP,
) -> list[str]:
    """Create *folders* under *root*.  Returns the paths actually passed to
    ``os.makedirs`` (ancestors are created implicitly)."""
    ordered = creation_order(folders)
    progress = ProgressReporter(len(ordered), label=MSG_PROGRESS_MAKING_FOLDERS,
                                step=step, callback=on_progress)
    progress.start()
    with log.section(LOG_MADE_FOLDERS) as out:
        for rel in ordered:
            full = os.path.join(root, rel)
            _refuse_symlink("mkdir", root, rel)
            try:
                os.makedirs(full, FOLDER_PERM, exist_ok=True)
            except OSError as exc:
                raise MirrorIOError("mkdir", full, exc) from exc
            out.write(rel)
            progress.advance()
    progress.finish()
    logger.debug(f"Made {len(ordered)} folder chains under {root}")
    return ordered


def clean_folders(
    folders: AbstractSet[str], root: str, *,
    log: OperationLog,
    on_progress: ProgressCallback | None = None,
    step: int = DEFAULT_STEP,
) -> list[str]:
    """Remove *folders* (and everything in them) under *root*.  Returns the
    paths actually passed to ``shutil.rmtree``."""
    ordered = deletion_order(folders)
    progress = ProgressReporter(len(ordered), label=MSG_PROGRESS_CLEANING_FOLDERS,
                                step=step, callback=on_progress)
    progress.start()
    with log.section(LOG_CLEANED_FOLDERS) as out:
        for rel in ordered:
            full = os.path.join(root, rel)
            try:
                shutil.rmtree(full)
            except OSError as exc:
                raise MirrorIOError("rmdir", full, exc) from exc
            out.write(rel)
            progress.advance()
    progress.finish()
    logger.debug(f"Removed {len(ordered)} folder trees under {root}")
    return ordered


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def copy_files(
    files: Mapping[str, int], total_size: int, src: str, dst: str, *,
    log: OperationLog,
    on_progress: ProgressCallback | None = None,
    step: int = DEFAULT_STEP,
) -> None:
    """Copy *files* (relative paths) from *src* to *dst*.

    Only contents are copied; an existing destination file is truncated and
    overwritten.  A symbolic link at the destination path, or on any of its
    parents, aborts the copy instead of being written through.  Progress is measured against *total_size* using the sizes
    recorded in *files*.
    """
    progress = ProgressReporter(total_size, label=MSG_PROGRESS_COPYING_FILES,
                                step=step, callback=on_progress)
    progress.start()
    with log.section(LOG_COPIED_FILES) as out:
        for rel in sorted_paths(files):
            src_path = os.path.join(src, rel)
            dst_path = os.path.join(dst, rel)
            _refuse_symlink("copy", dst, rel)
            try:
                shutil.copyfile(src_path, dst_path, follow_symlinks=False)
            except OSError as exc:
                raise MirrorIOError("copy", src_path, exc) from exc
            out.write(rel)
            progress.advance(files[rel])
    progress.finish()
    logger.debug(f"Copied {len(files)} files ({total_size} bytes) to {dst}")


def clean_files(
    files: Mapping[str, int], total_size: int, root: str, *,
    log: OperationLog,
    on_progress: ProgressCallback | None = None,
    step: int = DEFAULT_STEP,
) -> None:
    """Remove *files* (relative paths) under *root*."""
    progress = ProgressReporter(total_size, label=MSG_PROGRESS_CLEANING_FILES,
                                step=step, callback=on_progress)
    progress.start()
    with log.section(LOG_CLEANED_FILES) as out:
        for rel in sorted_paths(files):
            full = os.path.join(root, rel)
            try:
                os.remove(full)
            except OSError as exc:
                raise MirrorIOError("remove", full, exc) from exc
            out.write(rel)
            progress.advance(files[rel])
    progress.finish()
    logger.debug(f"Removed {len(files)} files ({total_size} bytes) under {root}")
