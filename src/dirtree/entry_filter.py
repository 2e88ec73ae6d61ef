"""Per-entry skip decisions.

The filter stacks, in order:

1. the built-in and custom skip lists (only while ``skip_common`` is on),
2. the hidden-entry policy (``skip_hidden``, applied at every depth),
3. any extra exclusion rules the caller passes in.

An entry matched by any of them is left out of the tree together with its
whole subtree.
"""

from typing import List, Optional

from dirtree.config import Configuration
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.name_rules import HiddenExclusionRules, NameExclusionRules
from dirtree.file_system_tree.directory_entry import DirectoryEntry


class EntryFilter:
    """Decides whether a directory entry is left out of the tree.

    The configuration's skip lists are copied when the filter is built, so later
    changes to the configuration do not affect a traversal already under way.

    Args:
        config: The traversal configuration.
        exclusion_rules: Optional extra rules (e.g. gitignore patterns) consulted
            after the configuration-driven ones.

    Example:
        >>> from dirtree.config import init_config
        >>> config = init_config()
        >>> config.custom_skip_dirs.append("dist")
        >>> entry_filter = EntryFilter(config)
        >>> entry_filter.should_skip_directory("dist"), entry_filter.should_skip_directory("src")
        (True, False)
        >>> entry_filter.should_skip_file(".hidden")
        True
        >>> config.skip_common = config.skip_hidden = False
        >>> EntryFilter(config).should_skip_directory("node_modules")
        False
    """

    def __init__(self, config: Configuration, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        rules: List[BaseExclusionRules] = []
        if config.skip_common:
            rules.append(
                NameExclusionRules.with_defaults(
                    extra_directory_names=config.custom_skip_dirs,
                    extra_file_names=config.custom_skip_files,
                )
            )
        if config.skip_hidden:
            rules.append(HiddenExclusionRules())
        if exclusion_rules is not None:
            rules.append(exclusion_rules)

        self._rules: Optional[CompositeExclusionRules] = CompositeExclusionRules(rules) if rules else None

    def should_skip(self, entry: DirectoryEntry) -> bool:
        """Check whether a listed entry is excluded."""
        if self._rules is None:
            return False
        return self._rules.exclude(entry.match_path)

    def should_skip_directory(self, name: str) -> bool:
        """Check whether a directory with this name, directly under the root, is excluded."""
        if self._rules is None:
            return False
        return self._rules.exclude(name + "/")

    def should_skip_file(self, name: str) -> bool:
        """Check whether a file with this name, directly under the root, is excluded."""
        if self._rules is None:
            return False
        return self._rules.exclude(name)


def should_skip_directory(name: str, config: Configuration) -> bool:
    """Check a directory name against the configuration's skip rules.

    Example:
        >>> from dirtree.config import init_config
        >>> should_skip_directory("__pycache__", init_config())
        True
    """
    return EntryFilter(config).should_skip_directory(name)


def should_skip_file(name: str, config: Configuration) -> bool:
    """Check a file name against the configuration's skip rules.

    Example:
        >>> from dirtree.config import init_config
        >>> should_skip_file("Thumbs.db", init_config()), should_skip_file("main.c", init_config())
        (True, False)
    """
    return EntryFilter(config).should_skip_file(name)
