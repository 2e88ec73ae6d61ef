"""Unit tests for the TreeRenderer class."""

import io
import os
from unittest.mock import patch

import pytest

from dirtree.config import Configuration, add_skip_directory
from dirtree.exceptions import ResolutionError, TargetNotADirectoryError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.file_system_tree.entry_lister import list_entries
from dirtree.file_system_tree.tree_renderer import TreeRenderer
from dirtree.types import EntryKind, TreeFormat


def unicode_config(**kwargs):
    return Configuration(format=TreeFormat.UNICODE, **kwargs)


def render(root, config=None, exclusion_rules=None):
    renderer = TreeRenderer(config if config is not None else unicode_config(), exclusion_rules)
    return list(renderer.stream_lines(root))


@pytest.fixture
def nested(tmp_path):
    """
    nested/
        docs/
            api/
                index.md
            guide.md
        src/
            main.py
        README.md
    """
    root = tmp_path / "nested"
    (root / "docs" / "api").mkdir(parents=True)
    (root / "docs" / "api" / "index.md").write_text("x")
    (root / "docs" / "guide.md").write_text("x")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("x")
    (root / "README.md").write_text("x")
    return root


def test_default_scenario(proj):
    assert render(proj) == ["proj", "├── a", "└── b.txt"]


def test_ascii_scenario(proj):
    assert render(proj, Configuration(format=TreeFormat.ASCII)) == ["proj", "|-- a", "+-- b.txt"]


def test_nested_prefixes(nested):
    assert render(nested) == [
        "nested",
        "├── README.md",
        "├── docs",
        "│   ├── api",
        "│   │   └── index.md",
        "│   └── guide.md",
        "└── src",
        "    └── main.py",
    ]


def test_nested_prefixes_ascii(nested):
    assert render(nested, Configuration(format=TreeFormat.ASCII)) == [
        "nested",
        "|-- README.md",
        "|-- docs",
        "|   |-- api",
        "|   |   +-- index.md",
        "|   +-- guide.md",
        "+-- src",
        "    +-- main.py",
    ]


def test_depth_limit_lists_but_does_not_expand(nested):
    assert render(nested, unicode_config(max_depth=1)) == [
        "nested",
        "├── README.md",
        "├── docs",
        "└── src",
    ]


def test_depth_limit_two(nested):
    assert render(nested, unicode_config(max_depth=2)) == [
        "nested",
        "├── README.md",
        "├── docs",
        "│   ├── api",
        "│   └── guide.md",
        "└── src",
        "    └── main.py",
    ]


@pytest.mark.parametrize("max_depth", [0, -1, -7])
def test_non_positive_depth_is_unlimited(nested, max_depth):
    assert render(nested, unicode_config(max_depth=max_depth)) == render(nested)


def test_siblings_sorted_case_sensitively(tmp_path):
    for name in ("a", "B", "_x", "10", "9"):
        (tmp_path / name).write_text("x")

    assert [line[4:] for line in render(tmp_path)[1:]] == ["10", "9", "B", "_x", "a"]


def test_last_sibling_uses_corner(tmp_path):
    (tmp_path / "only").mkdir()
    (tmp_path / "only" / "child").write_text("x")

    assert render(tmp_path)[1:] == ["└── only", "    └── child"]


def test_empty_root(tmp_path):
    assert render(tmp_path) == [tmp_path.name]


def test_skipped_directory_contents_are_not_shown(proj):
    (proj / "node_modules" / "pkg").mkdir(parents=True)
    (proj / "node_modules" / "pkg" / "index.js").write_text("x")

    assert render(proj) == ["proj", "├── a", "└── b.txt"]


def test_custom_skip_directory(proj):
    (proj / "build").mkdir()
    config = unicode_config()
    add_skip_directory(config, "build")

    assert render(proj, config) == ["proj", "├── a", "└── b.txt"]


def test_show_all(proj):
    config = unicode_config(skip_hidden=False, skip_common=False)

    assert render(proj, config) == ["proj", "├── .git", "│   └── HEAD", "├── a", "└── b.txt"]


def test_exclusion_rules_use_relative_paths(nested):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("docs/api/")
    rules.add_rule("*.py")

    assert render(nested, exclusion_rules=rules) == [
        "nested",
        "├── README.md",
        "├── docs",
        "│   └── guide.md",
        "└── src",
    ]


def test_counts(nested):
    renderer = TreeRenderer(unicode_config())
    list(renderer.stream_lines(nested))

    assert renderer.directory_count == 3
    assert renderer.file_count == 4


def test_counts_reset_between_traversals(nested, proj):
    renderer = TreeRenderer(unicode_config())
    list(renderer.stream_lines(nested))
    list(renderer.stream_lines(proj))

    assert (renderer.directory_count, renderer.file_count) == (1, 1)


def test_render_writes_newline_terminated_lines(proj):
    sink = io.StringIO()
    TreeRenderer(unicode_config()).render(proj, sink)

    assert sink.getvalue() == "proj\n├── a\n└── b.txt\n"


def test_root_given_with_trailing_separator(proj):
    assert render(str(proj) + os.sep)[0] == "proj"


def test_missing_root_raises_before_output(tmp_path):
    renderer = TreeRenderer(unicode_config())
    with pytest.raises(ResolutionError):
        renderer.stream_lines(tmp_path / "missing")


def test_file_root_raises_before_output(proj):
    sink = io.StringIO()
    with pytest.raises(TargetNotADirectoryError):
        TreeRenderer(unicode_config()).render(proj / "b.txt", sink)
    assert sink.getvalue() == ""


def test_symlink_cycle_terminates(tmp_path, symlinks_supported):
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    os.symlink(root, root / "sub" / "back")
    os.symlink(root / "sub", root / "shortcut")

    assert render(root) == ["root", "├── shortcut", "└── sub", "    └── back"]


def test_symlinks_count_as_files(tmp_path, symlinks_supported):
    (tmp_path / "real").mkdir()
    os.symlink(tmp_path / "real", tmp_path / "link")
    renderer = TreeRenderer(unicode_config())
    list(renderer.stream_lines(tmp_path))

    assert (renderer.directory_count, renderer.file_count) == (1, 1)


def test_directory_expanded_only_once(proj):
    root = os.path.realpath(proj)

    def fake_list_entries(directory, relative_path=""):
        if directory == root:
            return [DirectoryEntry("again", root, EntryKind.DIRECTORY, "again")]
        return []

    with patch("dirtree.file_system_tree.tree_renderer.list_entries", side_effect=fake_list_entries) as lister:
        lines = render(proj)

    assert lines == ["proj", "└── again"]
    assert lister.call_count == 1


def test_unreadable_directory_is_listed_without_contents(nested):
    unreadable = os.path.join(os.path.realpath(nested), "docs")

    def failing_list_entries(directory, relative_path=""):
        if directory == unreadable:
            return []
        return list_entries(directory, relative_path)

    with patch("dirtree.file_system_tree.tree_renderer.list_entries", side_effect=failing_list_entries):
        lines = render(nested)

    assert lines == ["nested", "├── README.md", "├── docs", "└── src", "    └── main.py"]


def test_deep_hierarchy_does_not_hit_recursion_limit(tmp_path):
    levels = 1100
    created = []
    path = tmp_path
    for _ in range(levels):
        path = path / "d"
        path.mkdir()
        created.append(path)

    try:
        lines = render(tmp_path)
    finally:
        # Remove bottom-up; recursive cleanup would exceed the recursion limit
        for path in reversed(created):
            path.rmdir()

    assert len(lines) == levels + 1
    assert lines[-1] == " " * 4 * (levels - 1) + "└── d"


def test_lines_are_streamed_lazily(nested):
    renderer = TreeRenderer(unicode_config())
    with patch("dirtree.file_system_tree.tree_renderer.list_entries", wraps=list_entries) as lister:
        lines = renderer.stream_lines(nested)
        assert lister.call_count == 0
        assert next(lines) == "nested"
        assert next(lines) == "├── README.md"
        assert lister.call_count == 1


def test_undecodable_name_is_rendered_with_surrogate_escapes(proj, undecodable_names_supported):
    open(os.path.join(os.fsencode(proj), b"caf\xe9.txt"), "wb").close()

    assert render(proj) == ["proj", "├── a", "├── b.txt", "└── caf\udce9.txt"]


def test_siblings_sorted_by_name_bytes(tmp_path, undecodable_names_supported):
    # b"\xff" sorts after the UTF-8 encoding of U+E000 (b"\xee\x80\x80"),
    # although its surrogate escape U+DCFF is the smaller code point
    open(os.path.join(os.fsencode(tmp_path), b"\xff"), "wb").close()
    (tmp_path / "\ue000").write_text("x")
    (tmp_path / "z").write_text("x")

    assert [line[4:] for line in render(tmp_path)[1:]] == ["z", "\ue000", "\udcff"]
