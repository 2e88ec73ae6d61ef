"""Configuration for a directory tree traversal.

A ``Configuration`` is an ordinary value owned by the caller. Nothing in
dirtree keeps configuration in module-level state; every traversal receives
the configuration it should honour.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dirtree.types import TreeFormat


def default_format() -> TreeFormat:
    """Return the glyph format suited to the host platform.

    Windows consoles get ASCII connectors; every other platform gets Unicode
    box-drawing characters.

    Returns:
        TreeFormat.ASCII on Windows, TreeFormat.UNICODE elsewhere.
    """
    return TreeFormat.ASCII if os.name == "nt" else TreeFormat.UNICODE


@dataclass
class Configuration:
    """Options controlling a traversal.

    Attributes:
        max_depth: Deepest level whose contents are listed, the root being level 1.
            Any value <= 0 means unlimited.
        skip_hidden: Skip entries whose names start with a dot, at every level.
        skip_common: Skip the built-in noise directories and files as well as the
            names added to ``custom_skip_dirs`` and ``custom_skip_files``.
        format: Connector glyphs to draw with.
        custom_skip_dirs: Extra directory names to skip while ``skip_common`` is on.
        custom_skip_files: Extra file names to skip while ``skip_common`` is on.

    Example:
        >>> config = Configuration(max_depth=2, format=TreeFormat.ASCII)
        >>> config.unlimited_depth
        False
        >>> Configuration().unlimited_depth
        True
    """

    max_depth: int = -1
    skip_hidden: bool = True
    skip_common: bool = True
    format: TreeFormat = field(default_factory=default_format)
    custom_skip_dirs: List[str] = field(default_factory=list)
    custom_skip_files: List[str] = field(default_factory=list)

    @property
    def unlimited_depth(self) -> bool:
        """Whether the traversal descends without a depth bound."""
        return self.max_depth <= 0


def init_config() -> Configuration:
    """Create a configuration holding the default settings.

    Defaults: unlimited depth, hidden entries skipped, common noise skipped,
    and the platform's preferred glyph format.

    Returns:
        A new Configuration the caller may adjust freely.

    Example:
        >>> config = init_config()
        >>> config.max_depth, config.skip_hidden, config.skip_common
        (-1, True, True)
    """
    return Configuration()


def add_skip_directory(config: Configuration, name: str) -> None:
    """Append a directory name to the configuration's custom skip list.

    Duplicates are kept as given.

    Example:
        >>> config = init_config()
        >>> add_skip_directory(config, "build")
        >>> config.custom_skip_dirs
        ['build']
    """
    config.custom_skip_dirs.append(name)


def add_skip_file(config: Configuration, name: str) -> None:
    """Append a file name to the configuration's custom skip list.

    Duplicates are kept as given.

    Example:
        >>> config = init_config()
        >>> add_skip_file(config, "README.md")
        >>> add_skip_file(config, "README.md")
        >>> config.custom_skip_files
        ['README.md', 'README.md']
    """
    config.custom_skip_files.append(name)
