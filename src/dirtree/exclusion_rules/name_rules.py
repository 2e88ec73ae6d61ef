"""Exclusion rules matching entries by exact name."""

from typing import FrozenSet, Iterable, Tuple

from .base_rules import BaseExclusionRules, split_entry_path

# Directories that are almost never interesting in a tree listing
DEFAULT_SKIP_DIRECTORIES: Tuple[str, ...] = (
    # Cross-platform
    "node_modules",
    ".git",
    ".vscode",
    "__pycache__",
    "venv",
    ".idea",
    # Windows
    "$RECYCLE.BIN",
    "System Volume Information",
    "Windows.old",
    "AppData",
    "Temp",
)

# Files that are almost never interesting in a tree listing
DEFAULT_SKIP_FILES: Tuple[str, ...] = (
    # Cross-platform
    ".gitignore",
    ".DS_Store",
    "Thumbs.db",
    ".env",
    # Windows
    "desktop.ini",
    "ntuser.dat",
    "NTUSER.DAT",
    "ntuser.dat.LOG1",
    "ntuser.dat.LOG2",
    "ntuser.ini",
)


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules that skip entries whose basename appears in a skip list.

    Directories are matched against the directory names only; files and other
    entries (symlinks, sockets, ...) against the file names only. Matching is
    exact and case-sensitive.

    Attributes:
        directory_names (FrozenSet[str]): Directory names to skip.
        file_names (FrozenSet[str]): File names to skip.

    Example:
        >>> rules = NameExclusionRules.with_defaults(extra_directory_names=["build"])
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("pkg/build/")
        True
        >>> rules.exclude("pkg/.DS_Store")
        True
        >>> rules.exclude("pkg/main.py")
        False
        >>> rules.add_rule("main.py")
        >>> rules.exclude("pkg/main.py")
        True
    """

    def __init__(self, directory_names: Iterable[str] = (), file_names: Iterable[str] = ()) -> None:
        """Initialize the rules with the names to skip.

        Args:
            directory_names: Names of directories to exclude.
            file_names: Names of files and other non-directory entries to exclude.
        """
        self.directory_names: FrozenSet[str] = frozenset(directory_names)
        self.file_names: FrozenSet[str] = frozenset(file_names)

    @classmethod
    def with_defaults(
        cls, extra_directory_names: Iterable[str] = (), extra_file_names: Iterable[str] = ()
    ) -> "NameExclusionRules":
        """Build rules from the built-in skip lists plus any extra names.

        Args:
            extra_directory_names: Directory names to skip in addition to DEFAULT_SKIP_DIRECTORIES.
            extra_file_names: File names to skip in addition to DEFAULT_SKIP_FILES.

        Returns:
            A new NameExclusionRules instance.
        """
        return cls(
            directory_names=[*DEFAULT_SKIP_DIRECTORIES, *extra_directory_names],
            file_names=[*DEFAULT_SKIP_FILES, *extra_file_names],
        )

    def exclude(self, path: str) -> bool:
        name, is_dir = split_entry_path(path)
        if is_dir:
            return name in self.directory_names
        return name in self.file_names

    def add_rule(self, rule: str) -> None:
        """Add a name to skip. A trailing slash makes it a directory name.

        Args:
            rule: The name to skip, e.g. "dist/" for a directory or "notes.txt" for a file.
        """
        name, is_dir = split_entry_path(rule)
        if is_dir:
            self.directory_names = self.directory_names | {name}
        else:
            self.file_names = self.file_names | {name}


class HiddenExclusionRules(BaseExclusionRules):
    """Exclusion rules that skip hidden entries (names starting with a dot).

    The rule applies at every depth, the traversal root's own children
    included.

    Example:
        >>> rules = HiddenExclusionRules()
        >>> rules.exclude(".cache/")
        True
        >>> rules.exclude("src/.env.local")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def exclude(self, path: str) -> bool:
        name, _ = split_entry_path(path)
        return name.startswith(".")
