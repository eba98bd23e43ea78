"""Exceptions for treemirror."""

from __future__ import annotations


class MirrorError(Exception):
    """Base class for every error raised by treemirror."""


class ArgumentError(MirrorError, ValueError):
    """Raised when the source or destination argument is missing or invalid."""


class NotFoundError(MirrorError, FileNotFoundError):
    """Raised when the source or destination does not exist or is not a directory."""


class MirrorIOError(MirrorError):
    """Raised when reading a tree, creating, copying, removing or logging fails.

    The run is aborted at the first failure.  *operation* and *path* name
    what was being done so the operator can fix the condition and re-run;
    the original :class:`OSError` is kept as *cause* (and ``__cause__``).
    """

    def __init__(self, operation: str, path: str, cause: OSError | None = None) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = f"{operation} {path}"
        if cause is not None:
            detail += f": {cause.strerror or cause}"
        super().__init__(detail)
