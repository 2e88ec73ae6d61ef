"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore
    pattern matching, delegating the matching itself to the pathspec library so that
    paths are matched the same way Git matches them.

    Supported syntax includes:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-only patterns (ending in /)
    - Anchored patterns (starting with /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Patterns from files and individually added rules are combined in the order they
    were supplied, so a later negation can re-include something an earlier pattern
    excluded.

    Attributes:
        spec (GitIgnoreSpec): Compiled matcher for all patterns added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("build/")
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")  # a file, not a directory
        False
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False

    Note:
        Paths given to exclude() use forward slashes and end in a slash for
        directories, which is how the tree walker presents them.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally with patterns from files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Root-relative path, with a trailing slash for directories.

        Returns:
            bool: True if the last pattern deciding on this path excludes it.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load .gitignore patterns from one or more files and append them.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. "*.pyc", "node_modules/" or "!keep.txt"."""
        self._lines.append(rule)
        self._compile()

    def has_rules(self) -> bool:
        """Check whether any pattern has been added."""
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def _compile(self) -> None:
        self.spec = GitIgnoreSpec.from_lines(self._lines)
