"""Mirror driver: validate roots, plan a diff, apply it.

Copy mode makes the destination contain everything the source contains;
clean mode removes from the destination everything the source lacks.
Interactive confirmation lives in the CLI, so everything here runs
unattended.
"""

from __future__ import annotations

import os

from loguru import logger

from ._exclude import DEFAULT_IGNORE_NAME, ExcludeFilter
from .apply import clean_files, clean_folders, copy_files, make_folders
from .diff import MirrorDiff, compute_diff
from .exceptions import ArgumentError, NotFoundError
from .index import read_tree
from .oplog import OperationLog
from .progress import DEFAULT_STEP, ProgressCallback

ERR_WRONG_ARGS = "wrong arguments, use --help for help"
ERR_SRC_NOT_FOUND = "source folder doesn't exist"
ERR_DST_NOT_FOUND = "destination folder doesn't exist"
ERR_SAME_FOLDER = "source and destination are the same folder"
ERR_NESTED = "source and destination folders are nested inside each other"


def _hidden_below(outer: str, inner: str, ignore_name: str | None) -> bool:
    """True if *inner* lies under a directory of *outer* named *ignore_name*."""
    if not ignore_name:
        return False
    return ignore_name in os.path.relpath(inner, outer).split(os.sep)


def validate_roots(
    src: str, dst: str, *, ignore_name: str | None = DEFAULT_IGNORE_NAME,
) -> tuple[str, str]:
    """Check both roots and return them as absolute paths ``(src, dst)``.

    One root may sit inside the other only below a directory named
    *ignore_name*, where the outer tree's index never reaches it.
    """
    if not src or not dst:
        raise ArgumentError(ERR_WRONG_ARGS)
    src = os.path.abspath(src)
    dst = os.path.abspath(dst)
    if not os.path.isdir(src):
        raise NotFoundError(ERR_SRC_NOT_FOUND)
    if not os.path.isdir(dst):
        raise NotFoundError(ERR_DST_NOT_FOUND)
    src_key = os.path.normcase(src)
    dst_key = os.path.normcase(dst)
    if src_key == dst_key:
        raise ArgumentError(ERR_SAME_FOLDER)
    try:
        common = os.path.commonpath([src_key, dst_key])
    except ValueError:
        # different drives
        return src, dst
    for outer, inner in ((src_key, dst_key), (dst_key, src_key)):
        if common == outer and not _hidden_below(outer, inner, ignore_name):
            raise ArgumentError(ERR_NESTED)
    return src, dst


def plan(
    src: str, dst: str, *,
    clean: bool = False,
    ignore_name: str | None = DEFAULT_IGNORE_NAME,
    exclude: ExcludeFilter | None = None,
) -> MirrorDiff:
    """Index both trees and return the work for copy or clean mode.

    Both trees are read completely before anything is compared, and nothing
    is written.
    """
    src_index = read_tree(src, ignore_name=ignore_name, exclude=exclude)
    dst_index = read_tree(dst, ignore_name=ignore_name, exclude=exclude)
    diff = compute_diff(dst_index, src_index, clean=clean)
    logger.debug(
        f"{'clean' if clean else 'copy'} plan: {len(diff.folders)} folders, "
        f"{len(diff.files)} files, {diff.total_size} bytes"
    )
    return diff


def apply_diff(
    diff: MirrorDiff, src: str, dst: str, *,
    log: OperationLog,
    on_progress: ProgressCallback | None = None,
    step: int = DEFAULT_STEP,
    on_done=None,
) -> None:
    """Carry out *diff* on disk.

    Copy mode makes folders before copying files; clean mode removes files
    before removing folders.  Empty categories are skipped.  *on_done* is
    called with no arguments after each category completes.
    """
    opts = dict(log=log, on_progress=on_progress, step=step)

    def _done():
        if on_done is not None:
            on_done()

    if diff.clean:
        if diff.files:
            clean_files(diff.files, diff.total_size, dst, **opts)
            _done()
        if diff.folders:
            clean_folders(diff.folders, dst, **opts)
            _done()
    else:
        if diff.folders:
            make_folders(diff.folders, dst, **opts)
            _done()
        if diff.files:
            copy_files(diff.files, diff.total_size, src, dst, **opts)
            _done()


def mirror_tree(
    src: str, dst: str, *,
    clean: bool = False,
    log: OperationLog | None = None,
    ignore_name: str | None = DEFAULT_IGNORE_NAME,
    exclude: ExcludeFilter | None = None,
    on_progress: ProgressCallback | None = None,
    step: int = DEFAULT_STEP,
) -> MirrorDiff:
    """Validate, plan and apply in one call.  Returns the applied diff.

    The log file is truncated only when there is work to do.
    """
    if exclude is not None:
        ignore_name = exclude.ignore_name
    src, dst = validate_roots(src, dst, ignore_name=ignore_name)
    diff = plan(src, dst, clean=clean, ignore_name=ignore_name, exclude=exclude)
    if diff.in_sync:
        return diff
    log = log or OperationLog()
    log.truncate()
    apply_diff(diff, src, dst, log=log, on_progress=on_progress, step=step)
    return diff
