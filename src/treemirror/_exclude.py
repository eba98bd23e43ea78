"""Exclude-filter support for tree indexing.

Combines the ignore-name rule (a directory with that exact base name is
skipped together with its whole subtree), ``--exclude`` patterns and
``--exclude-from`` files into a single predicate used by
:func:`~treemirror.index.read_tree`.

Pattern syntax follows gitignore rules (implemented by
``dulwich.ignore.IgnoreFilter``).  Paths handed to the filter use the
platform separator and are converted to forward slashes before matching.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from dulwich.ignore import IgnoreFilter

DEFAULT_IGNORE_NAME = "dont_mirror"


class ExcludeFilter:
    """Combines the ignore-name, --exclude patterns and --exclude-from."""

    def __init__(
        self,
        *,
        ignore_name: str | None = DEFAULT_IGNORE_NAME,
        patterns: Sequence[str] | None = None,
        exclude_from: str | None = None,
    ) -> None:
        self.ignore_name = ignore_name or None
        base_lines: list[bytes] = []
        for p in patterns or ():
            base_lines.append(p.encode("utf-8"))
        if exclude_from is not None:
            path = Path(exclude_from)
            for raw in path.read_bytes().splitlines():
                line = raw.strip()
                if line and not line.startswith(b"#"):
                    base_lines.append(line)
        self._base: IgnoreFilter | None = (
            IgnoreFilter(base_lines) if base_lines else None
        )

    # ------------------------------------------------------------------
    def is_excluded(self, rel_path: str, *, is_dir: bool = False) -> bool:
        """Return True if *rel_path* must be left out of the index.

        A directory whose base name equals the ignore-name is always
        excluded; patterns are checked after that.
        """
        if is_dir and self.ignore_name is not None:
            if os.path.basename(rel_path) == self.ignore_name:
                return True
        if self._base is None:
            return False
        check = rel_path.replace(os.sep, "/")
        if is_dir:
            check += "/"
        return self._base.is_ignored(check) is True
