"""Unit tests for the configuration module."""

from unittest.mock import patch

from dirtree.config import Configuration, add_skip_directory, add_skip_file, default_format, init_config
from dirtree.types import TreeFormat


def test_init_config_defaults():
    """Defaults: unlimited depth, skip hidden and common entries."""
    config = init_config()

    assert config.max_depth == -1
    assert config.unlimited_depth
    assert config.skip_hidden is True
    assert config.skip_common is True
    assert config.custom_skip_dirs == []
    assert config.custom_skip_files == []


def test_init_config_returns_independent_values():
    """Each call returns a fresh value; skip lists are not shared."""
    first = init_config()
    second = init_config()
    add_skip_directory(first, "build")

    assert second.custom_skip_dirs == []


def test_default_format_posix():
    with patch("dirtree.config.os.name", "posix"):
        assert default_format() == TreeFormat.UNICODE


def test_default_format_windows():
    with patch("dirtree.config.os.name", "nt"):
        assert default_format() == TreeFormat.ASCII


def test_unlimited_depth_convention():
    """Zero and negative depths both mean no limit."""
    assert Configuration(max_depth=0).unlimited_depth
    assert Configuration(max_depth=-5).unlimited_depth
    assert not Configuration(max_depth=1).unlimited_depth


def test_add_skip_directory_and_file_keep_duplicates():
    config = init_config()
    add_skip_directory(config, "build")
    add_skip_directory(config, "build")
    add_skip_file(config, "README.md")

    assert config.custom_skip_dirs == ["build", "build"]
    assert config.custom_skip_files == ["README.md"]


def test_tree_format_values():
    assert TreeFormat("ascii") is TreeFormat.ASCII
    assert TreeFormat("unicode") is TreeFormat.UNICODE
    assert TreeFormat.ASCII == "ascii"
