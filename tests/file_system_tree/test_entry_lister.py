"""Unit tests for listing a single directory."""

import os
from unittest.mock import MagicMock, patch

from dirtree.file_system_tree.entry_lister import list_entries
from dirtree.types import EntryKind


def by_name(entries):
    return {entry.name: entry for entry in entries}


def test_lists_immediate_children_only(tmp_path):
    (tmp_path / "sub" / "deeper").mkdir(parents=True)
    (tmp_path / "sub" / "inner.txt").write_text("x")
    (tmp_path / "top.txt").write_text("x")

    entries = by_name(list_entries(str(tmp_path)))

    assert set(entries) == {"sub", "top.txt"}
    assert entries["sub"].kind is EntryKind.DIRECTORY
    assert entries["top.txt"].kind is EntryKind.FILE


def test_absolute_and_relative_paths(tmp_path):
    (tmp_path / "file.txt").write_text("x")

    entry = list_entries(str(tmp_path), "docs/api")[0]

    assert entry.absolute_path == os.path.join(str(tmp_path), "file.txt")
    assert entry.relative_path == "docs/api/file.txt"


def test_relative_path_at_root(tmp_path):
    (tmp_path / "file.txt").write_text("x")

    assert list_entries(str(tmp_path))[0].relative_path == "file.txt"


def test_hidden_entries_are_listed(tmp_path):
    """Filtering is not the lister's job."""
    (tmp_path / ".hidden").write_text("x")

    assert [entry.name for entry in list_entries(str(tmp_path))] == [".hidden"]


def test_empty_directory(tmp_path):
    assert list_entries(str(tmp_path)) == []


def test_missing_directory(tmp_path):
    assert list_entries(str(tmp_path / "missing")) == []


def test_file_instead_of_directory(tmp_path):
    (tmp_path / "file.txt").write_text("x")

    assert list_entries(str(tmp_path / "file.txt")) == []


def test_symlinks_are_classified_by_their_own_type(tmp_path, symlinks_supported):
    (tmp_path / "real_dir").mkdir()
    (tmp_path / "real_file.txt").write_text("x")
    os.symlink(tmp_path / "real_dir", tmp_path / "dir_link")
    os.symlink(tmp_path / "real_file.txt", tmp_path / "file_link")
    os.symlink(tmp_path / "nowhere", tmp_path / "dangling")

    entries = by_name(list_entries(str(tmp_path)))

    assert entries["real_dir"].kind is EntryKind.DIRECTORY
    assert entries["dir_link"].kind is EntryKind.OTHER
    assert entries["file_link"].kind is EntryKind.OTHER
    assert entries["dangling"].kind is EntryKind.OTHER


def test_unreadable_entry_is_skipped(tmp_path):
    (tmp_path / "good.txt").write_text("x")
    (tmp_path / "bad.txt").write_text("x")
    real_scandir = os.scandir

    class FlakyEntries:
        def __init__(self, path):
            self._context = real_scandir(path)

        def __enter__(self):
            items = []
            for item in self._context.__enter__():
                if item.name == "bad.txt":
                    broken = MagicMock()
                    broken.name = item.name
                    broken.path = item.path
                    broken.is_dir.side_effect = PermissionError("denied")
                    items.append(broken)
                else:
                    items.append(item)
            return iter(items)

        def __exit__(self, *exc_info):
            return self._context.__exit__(*exc_info)

    with patch("dirtree.file_system_tree.entry_lister.os.scandir", FlakyEntries):
        entries = list_entries(str(tmp_path))

    assert [entry.name for entry in entries] == ["good.txt"]


def test_unreadable_directory_yields_empty_listing(tmp_path):
    with patch("dirtree.file_system_tree.entry_lister.os.scandir", side_effect=PermissionError("denied")):
        assert list_entries(str(tmp_path)) == []


def test_failure_mid_listing_keeps_collected_entries(tmp_path):
    (tmp_path / "first.txt").write_text("x")
    with os.scandir(tmp_path) as iterator:
        first = next(iterator)

    def entries_then_failure():
        yield first
        raise OSError("I/O error")

    scandir = MagicMock()
    scandir.return_value.__enter__.return_value = entries_then_failure()

    with patch("dirtree.file_system_tree.entry_lister.os.scandir", scandir):
        entries = list_entries(str(tmp_path))

    assert [entry.name for entry in entries] == ["first.txt"]
