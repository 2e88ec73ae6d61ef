"""Entry produced while listing one directory."""

from dataclasses import dataclass

from dirtree.types import EntryKind


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory.

    Attributes:
        name (str): The entry's basename.
        absolute_path (str): Absolute path of the entry, built from its parent's
            canonical path.
        kind (EntryKind): The entry's own type; symlinks are never DIRECTORY.
        relative_path (str): Path from the traversal root using "/" separators.

    Example:
        >>> entry = DirectoryEntry("src", "/proj/src", EntryKind.DIRECTORY, "src")
        >>> entry.is_dir
        True
        >>> entry.match_path
        'src/'
        >>> DirectoryEntry("a.txt", "/proj/src/a.txt", EntryKind.FILE, "src/a.txt").match_path
        'src/a.txt'
    """

    name: str
    absolute_path: str
    kind: EntryKind
    relative_path: str

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def match_path(self) -> str:
        """Path handed to exclusion rules: relative, with a trailing slash for directories."""
        return self.relative_path + "/" if self.is_dir else self.relative_path
