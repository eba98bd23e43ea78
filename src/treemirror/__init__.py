from loguru import logger

from ._exclude import DEFAULT_IGNORE_NAME, ExcludeFilter
from ._format import bytes_to_mb, thousand_separator
from .apply import clean_files, clean_folders, copy_files, make_folders
from .diff import (
    MirrorDiff,
    compute_diff,
    files_to_clean,
    folders_to_clean,
    missing_files,
    missing_folders,
)
from .exceptions import ArgumentError, MirrorError, MirrorIOError, NotFoundError
from .index import TreeIndex, read_tree
from .mirror import apply_diff, mirror_tree, plan, validate_roots
from .oplog import DEFAULT_LOG_FILE, OperationLog
from .order import creation_order, deletion_order, is_ancestor, sorted_paths
from .progress import DEFAULT_STEP, ProgressReporter

logger.disable("treemirror")

__all__ = [
    "DEFAULT_IGNORE_NAME", "DEFAULT_LOG_FILE", "DEFAULT_STEP",
    "ExcludeFilter", "TreeIndex", "read_tree",
    "MirrorDiff", "compute_diff",
    "missing_folders", "folders_to_clean", "missing_files", "files_to_clean",
    "sorted_paths", "is_ancestor", "creation_order", "deletion_order",
    "ProgressReporter", "OperationLog",
    "make_folders", "clean_folders", "copy_files", "clean_files",
    "validate_roots", "plan", "apply_diff", "mirror_tree",
    "bytes_to_mb", "thousand_separator",
    "MirrorError", "ArgumentError", "NotFoundError", "MirrorIOError",
]
