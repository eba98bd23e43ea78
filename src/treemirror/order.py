"""Ordering and collapsing of directory operations.

Directories are created with a recursive primitive (``os.makedirs``) and
removed with one (``shutil.rmtree``), so a plan only needs one operation per
chain of nested paths:

* creating the deepest member of a chain creates all of its ancestors,
* removing the shallowest member of a subtree removes all of its
  descendants.

Paths are sorted on their components rather than on the raw string.  With a
plain string sort ``"a-b"`` lands between ``"a"`` and ``"a/b"`` because
``"-"`` sorts before the separator, which breaks the adjacency the collapse
relies on.  Sorting on components keeps every directory immediately followed
by its own descendants.
"""

from __future__ import annotations

import os
from typing import Iterable


def _path_key(path: str) -> tuple[str, ...]:
    return tuple(path.split(os.sep))


def sorted_paths(paths: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Return *paths* sorted component-wise.

    Accepts any iterable of path keys, e.g. a folder set or a
    ``{path: size}`` file index.
    """
    return sorted(paths, key=_path_key, reverse=reverse)


def is_ancestor(ancestor: str, path: str) -> bool:
    """Return True if *ancestor* is a strict ancestor directory of *path*.

    The test respects component boundaries: ``"ab"`` is not an ancestor of
    ``"abc"``.
    """
    return path.startswith(ancestor + os.sep)


def creation_order(paths: Iterable[str]) -> list[str]:
    """Return the directories to create, ancestors collapsed into descendants.

    A path is dropped when the path sorted right after it is one of its
    descendants; what remains are the leaves of the set in ascending order.
    """
    ordered = sorted_paths(paths)
    result: list[str] = []
    for i, path in enumerate(ordered):
        if i + 1 < len(ordered) and is_ancestor(path, ordered[i + 1]):
            continue
        result.append(path)
    return result


def deletion_order(paths: Iterable[str]) -> list[str]:
    """Return the directories to remove, descendants collapsed into ancestors.

    Only the shallowest member of each disjoint subtree is kept, so no
    removal ever targets a path an earlier removal already took away.  The
    result is in descending order.
    """
    roots: list[str] = []
    for path in sorted_paths(paths):
        if roots and is_ancestor(roots[-1], path):
            continue
        roots.append(path)
    roots.reverse()
    return roots
