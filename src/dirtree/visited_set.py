"""Cycle guard for directory traversal."""

from typing import Set


class VisitedSet:
    """Set of canonical absolute paths already expanded during one traversal.

    A path is recorded before its children are listed and is never removed,
    so each directory is expanded at most once no matter how many routes
    (bind mounts, repeated hierarchies, symlink cycles) lead back to it.

    Each traversal owns a fresh instance; instances are never shared.

    Example:
        >>> visited = VisitedSet()
        >>> visited.contains("/srv/data")
        False
        >>> visited.mark_visited("/srv/data")
        >>> visited.mark_visited("/srv/data")
        >>> "/srv/data" in visited, len(visited)
        (True, 1)
    """

    def __init__(self) -> None:
        self._paths: Set[str] = set()

    def contains(self, path: str) -> bool:
        """Check whether a path has already been recorded.

        Args:
            path: Canonical absolute path. Compared by exact string equality.

        Returns:
            True if the path was marked visited earlier in this traversal.
        """
        return path in self._paths

    def mark_visited(self, path: str) -> None:
        """Record a path as visited. Recording it twice has no further effect."""
        self._paths.add(path)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)
