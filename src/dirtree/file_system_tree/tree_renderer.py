"""Depth-first rendering of a directory hierarchy as text lines.

This module provides the TreeRenderer class, which walks a directory hierarchy
and produces the lines of a ``tree``-style listing, honouring the depth limit,
skip rules and glyph format of a Configuration.
"""

import os
from typing import Iterator, List, Optional, Tuple

from dirtree.config import Configuration
from dirtree.entry_filter import EntryFilter
from dirtree.exceptions import TargetNotADirectoryError
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.file_system_tree.entry_lister import list_entries
from dirtree.file_system_tree.glyphs import GlyphStyle, style_for
from dirtree.path_resolver import resolve
from dirtree.types import EntryKind, PathType, Sink
from dirtree.visited_set import VisitedSet

# (line, entry, prefix for the entry's own children)
_Row = Tuple[str, DirectoryEntry, str]


class TreeRenderer:
    """Renders a directory hierarchy as ``tree``-style text.

    Output starts with the root directory's name, followed by one line per
    entry. Siblings are ordered by the bytes of their names (as ``strcmp`` would
    order them, so case-sensitive) and connected with the glyphs of the configured format.

    Traversal semantics:
        - The walk is depth-first and uses an explicit stack, so arbitrarily deep
          hierarchies do not run into Python's recursion limit.
        - The root is at depth 1. With ``max_depth > 0``, a directory deeper than
          ``max_depth`` is still listed by its parent but its own contents are not.
        - Each canonical directory path is expanded at most once per traversal.
        - Symbolic links are drawn as leaves and never entered.
        - Entries that cannot be read are silently left out.

    Attributes:
        config (Configuration): The configuration being honoured.
        directory_count (int): Directories emitted by the most recent traversal.
        file_count (int): Non-directory entries emitted by the most recent traversal.

    Example:
        >>> import io, os, tempfile
        >>> from dirtree.config import Configuration
        >>> from dirtree.types import TreeFormat
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = os.path.join(tmpdir, "proj")
        ...     os.makedirs(os.path.join(root, "a"))
        ...     open(os.path.join(root, "b.txt"), "w").close()
        ...     renderer = TreeRenderer(Configuration(format=TreeFormat.ASCII))
        ...     sink = io.StringIO()
        ...     renderer.render(root, sink)
        >>> print(sink.getvalue(), end="")
        proj
        |-- a
        +-- b.txt
        >>> renderer.directory_count, renderer.file_count
        (1, 1)
    """

    def __init__(self, config: Configuration, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        """Initialize a TreeRenderer.

        Args:
            config: Traversal configuration. Its skip lists are read once, here.
            exclusion_rules: Optional extra rules applied after the configuration's
                own skip rules, matched against root-relative paths.
        """
        self.config = config
        self._max_depth: Optional[int] = None if config.unlimited_depth else config.max_depth
        self._style: GlyphStyle = style_for(config.format)
        self._entry_filter = EntryFilter(config, exclusion_rules)
        self.directory_count = 0
        self.file_count = 0

    def stream_lines(self, root_path: PathType) -> Iterator[str]:
        """Generate the tree one line at a time, without trailing newlines.

        The root is resolved and validated immediately, before the iterator is
        returned, so a bad root fails without producing any output.

        Args:
            root_path: Directory to render. Can be any path-like object.

        Returns:
            Iterator over the lines of the tree, the root's name first.

        Raises:
            ResolutionError: If the root cannot be resolved.
            TargetNotADirectoryError: If the root is not a directory.
        """
        root = resolve(root_path)
        if not os.path.isdir(root):
            raise TargetNotADirectoryError(str(root_path))
        return self._walk(root)

    def render(self, root_path: PathType, sink: Sink) -> None:
        """Write the tree to a sink, each line terminated by a newline.

        Args:
            root_path: Directory to render.
            sink: Any object with a ``write(str)`` method.

        Raises:
            ResolutionError: If the root cannot be resolved.
            TargetNotADirectoryError: If the root is not a directory.
            OSError: If writing to the sink fails.
        """
        for line in self.stream_lines(root_path):
            sink.write(line + "\n")

    def _walk(self, root: str) -> Iterator[str]:
        visited = VisitedSet()
        self.directory_count = 0
        self.file_count = 0

        yield os.path.basename(root) or root

        # Each frame holds the depth of the listed directory and its pending rows
        stack: List[Tuple[int, Iterator[_Row]]] = [(1, self._expand(root, "", "", 1, visited))]
        while stack:
            depth, rows = stack[-1]
            row = next(rows, None)
            if row is None:
                stack.pop()
                continue

            line, entry, child_prefix = row
            if entry.kind is EntryKind.DIRECTORY:
                self.directory_count += 1
            else:
                self.file_count += 1
            yield line

            if entry.kind is EntryKind.DIRECTORY:
                child_rows = self._expand(entry.absolute_path, entry.relative_path, child_prefix, depth + 1, visited)
                stack.append((depth + 1, child_rows))

    def _expand(self, path: str, relative_path: str, prefix: str, depth: int, visited: VisitedSet) -> Iterator[_Row]:
        """List one directory and return its formatted rows.

        Yields nothing when the directory is past the depth limit or was already
        expanded earlier in this traversal.
        """
        if self._max_depth is not None and depth > self._max_depth:
            return iter(())
        if visited.contains(path):
            return iter(())
        visited.mark_visited(path)

        entries = [entry for entry in list_entries(path, relative_path) if not self._entry_filter.should_skip(entry)]
        # Byte order, so undecodable names (surrogate escapes) sort like their raw bytes
        entries.sort(key=lambda entry: os.fsencode(entry.name))

        rows: List[_Row] = []
        last_index = len(entries) - 1
        for index, entry in enumerate(entries):
            is_last = index == last_index
            line = prefix + self._style.connector(is_last) + entry.name
            rows.append((line, entry, prefix + self._style.continuation(is_last)))
        return iter(rows)
