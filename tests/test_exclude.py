"""Tests for ExcludeFilter and its integration with read_tree."""

import os

import pytest

from treemirror import DEFAULT_IGNORE_NAME, ExcludeFilter, read_tree

from conftest import p


# ---------------------------------------------------------------------------
# Unit tests for ExcludeFilter
# ---------------------------------------------------------------------------

class TestIgnoreName:
    def test_default_name(self):
        ef = ExcludeFilter()
        assert ef.ignore_name == DEFAULT_IGNORE_NAME == "dont_mirror"
        assert ef.is_excluded("dont_mirror", is_dir=True) is True
        assert ef.is_excluded(p("a/b/dont_mirror"), is_dir=True) is True

    def test_only_exact_base_name(self):
        ef = ExcludeFilter()
        assert ef.is_excluded("dont_mirror_2", is_dir=True) is False
        assert ef.is_excluded(p("dont_mirror/child"), is_dir=True) is False

    def test_file_with_ignore_name_is_kept(self):
        ef = ExcludeFilter()
        assert ef.is_excluded("dont_mirror") is False

    def test_custom_name(self):
        ef = ExcludeFilter(ignore_name=".nomirror")
        assert ef.is_excluded(".nomirror", is_dir=True) is True
        assert ef.is_excluded("dont_mirror", is_dir=True) is False

    @pytest.mark.parametrize("name", [None, ""])
    def test_disabled(self, name):
        ef = ExcludeFilter(ignore_name=name)
        assert ef.ignore_name is None
        assert ef.is_excluded("dont_mirror", is_dir=True) is False

    def test_no_patterns_excludes_no_files(self):
        ef = ExcludeFilter()
        assert ef.is_excluded("a.tmp") is False
        assert ef.is_excluded(p("sub/dont_mirror")) is False


class TestPatterns:
    def test_pattern_match(self):
        ef = ExcludeFilter(patterns=["*.tmp"])
        assert ef.is_excluded("foo.tmp") is True
        assert ef.is_excluded(p("sub/bar.tmp")) is True

    def test_pattern_no_match(self):
        ef = ExcludeFilter(patterns=["*.tmp"])
        assert ef.is_excluded("foo.txt") is False

    def test_directory_pattern(self):
        ef = ExcludeFilter(patterns=["cache/"])
        assert ef.is_excluded("cache", is_dir=True) is True
        # A file named "cache" is not matched by "cache/"
        assert ef.is_excluded("cache", is_dir=False) is False

    def test_negation(self):
        ef = ExcludeFilter(patterns=["*.tmp", "!keep.tmp"])
        assert ef.is_excluded("foo.tmp") is True
        assert ef.is_excluded("keep.tmp") is False

    def test_anchored(self):
        ef = ExcludeFilter(patterns=["/build"])
        assert ef.is_excluded("build") is True
        assert ef.is_excluded(p("src/build")) is False

    def test_platform_separator_converted(self):
        ef = ExcludeFilter(patterns=["photos/raw/"])
        assert ef.is_excluded(os.path.join("photos", "raw"), is_dir=True) is True

    def test_exclude_from_file(self, tmp_path):
        pfile = tmp_path / "excludes.txt"
        pfile.write_text("*.log\n# comment\n\nThumbs.db\n")
        ef = ExcludeFilter(exclude_from=str(pfile))
        assert ef.is_excluded("app.log") is True
        assert ef.is_excluded(p("pics/Thumbs.db")) is True
        assert ef.is_excluded("app.txt") is False

    def test_patterns_and_file_combined(self, tmp_path):
        pfile = tmp_path / "excludes.txt"
        pfile.write_text("*.log\n")
        ef = ExcludeFilter(patterns=["*.tmp"], exclude_from=str(pfile))
        assert ef.is_excluded("a.log") is True
        assert ef.is_excluded("a.tmp") is True
        assert ef.is_excluded("a.txt") is False

    def test_missing_exclude_from(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ExcludeFilter(exclude_from=str(tmp_path / "nope"))


# ---------------------------------------------------------------------------
# Integration with read_tree
# ---------------------------------------------------------------------------

class TestReadTreeExclude:
    def test_files_filtered(self, tmp_path, make_tree):
        root = make_tree(tmp_path / "root", {
            "a.txt": b"a", "a.tmp": b"t", "sub/b.txt": b"b", "sub/b.tmp": b"t",
        })
        index = read_tree(str(root), exclude=ExcludeFilter(patterns=["*.tmp"]))
        assert set(index.files) == {"a.txt", p("sub/b.txt")}

    def test_directory_pruned(self, tmp_path, make_tree):
        root = make_tree(tmp_path / "root", {"keep.txt": b"k", "cache/x/y.bin": b"y"})
        index = read_tree(str(root), exclude=ExcludeFilter(patterns=["cache/"]))
        assert index.folders == set()
        assert set(index.files) == {"keep.txt"}

    def test_exclude_carries_ignore_name(self, tmp_path, make_tree):
        root = make_tree(tmp_path / "root", {"skip/f": b"f", "dont_mirror/g": b"g"})
        index = read_tree(str(root), exclude=ExcludeFilter(ignore_name="skip"))
        assert index.folders == {"dont_mirror"}
        assert set(index.files) == {p("dont_mirror/g")}
