"""Shared fixtures for treemirror tests."""

import os

import pytest
from click.testing import CliRunner
from loguru import logger


def p(unix_path):
    """Turn a forward-slash path into a platform path."""
    return os.path.join(*unix_path.split("/"))


@pytest.fixture(autouse=True)
def _quiet_logger():
    """The CLI enables treemirror logging; put it back after each test."""
    yield
    logger.disable("treemirror")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def make_tree():
    """Return a helper that builds a tree from ``{path: bytes | None}``.

    ``None`` values create directories, everything else creates a file with
    that content.
    """
    def _make(root, entries):
        root.mkdir(parents=True, exist_ok=True)
        for rel, data in entries.items():
            full = root.joinpath(*rel.split("/"))
            if data is None:
                full.mkdir(parents=True, exist_ok=True)
            else:
                full.parent.mkdir(parents=True, exist_ok=True)
                full.write_bytes(data)
        return root
    return _make


@pytest.fixture
def trees(tmp_path, make_tree):
    """A source and a destination that share some content.

    \b
    src:  same_1/same_2/not_in_dst/   _same_1 (1 byte)
          same_1/same_2/_not_in_dst (1)   same_1/_different (2)
    dst:  same_1/same_2/not_in_src/   _same_1 (1 byte)
          same_1/same_2/_not_in_src (1)   same_1/_different (1)
    """
    src = make_tree(tmp_path / "src", {
        "same_1/same_2/not_in_dst": None,
        "_same_1": b"s",
        "same_1/same_2/_not_in_dst": b"n",
        "same_1/_different": b"dd",
    })
    dst = make_tree(tmp_path / "dst", {
        "same_1/same_2/not_in_src": None,
        "_same_1": b"s",
        "same_1/same_2/_not_in_src": b"n",
        "same_1/_different": b"d",
    })
    return src, dst
