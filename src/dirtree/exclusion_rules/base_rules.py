from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Every rule type answers one question: should the entry at a given path be
    left out of the tree? Paths handed to ``exclude()`` are relative to the
    traversal root, use forward slashes, and carry a trailing slash when the
    entry is a directory (the .gitignore convention). Loading rules from files
    and adding individual rules are optional capabilities that depend on the
    rule type.

    Example:
        >>> from dirtree.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(directory_names=["build"], file_names=["notes.txt"])
        >>> rules.exclude("src/build/")
        True
        >>> rules.exclude("src/build")  # a file called build
        False
        >>> rules.load_rules("ignore.txt")
        Traceback (most recent call last):
            ...
        NotImplementedError: NameExclusionRules doesn't support loading rules from files.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if the entry at a given path should be excluded.

        Args:
            path (str): Root-relative path of the entry, using "/" as separator,
                ending in "/" if the entry is a directory.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file-based rules use this default
        implementation, which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that don't support adding individual rules use this default
        implementation, which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. The format depends on the rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")


def split_entry_path(path: str) -> Tuple[str, bool]:
    """Split an entry path into its basename and a directory flag.

    Example:
        >>> split_entry_path("src/node_modules/")
        ('node_modules', True)
        >>> split_entry_path("README.md")
        ('README.md', False)
    """
    is_dir = path.endswith("/")
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return name, is_dir
