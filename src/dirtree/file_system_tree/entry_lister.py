"""Listing of a single directory's immediate children."""

import os
from typing import List, Optional

from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.types import EntryKind


def list_entries(directory: str, relative_path: str = "") -> List[DirectoryEntry]:
    """List the immediate children of a directory.

    Entries are classified by their own type without following symlinks, so a
    symlink to a directory comes back as ``EntryKind.OTHER`` and will be drawn as
    a leaf. The result is in filesystem order; sorting is the caller's job.

    Failures never propagate:
    - an entry whose type cannot be determined is left out;
    - a directory that cannot be opened (permission denied, removed meanwhile)
      yields an empty list;
    - if reading stops partway, the entries read so far are returned.

    Args:
        directory: Absolute path of the directory to list.
        relative_path: Path of that directory relative to the traversal root,
            used to build each entry's ``relative_path``. Empty for the root.

    Returns:
        The directory's entries, ``.`` and ``..`` excluded.

    Example:
        >>> import os, tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     os.mkdir(os.path.join(tmpdir, "docs"))
        ...     open(os.path.join(tmpdir, "setup.cfg"), "w").close()
        ...     entries = sorted(list_entries(tmpdir, "proj"), key=lambda e: e.name)
        >>> [(e.name, e.kind.value, e.relative_path) for e in entries]
        [('docs', 'directory', 'proj/docs'), ('setup.cfg', 'file', 'proj/setup.cfg')]
        >>> list_entries("/no/such/directory")
        []
    """
    entries: List[DirectoryEntry] = []
    try:
        with os.scandir(directory) as iterator:
            for item in iterator:
                if item.name in (".", ".."):
                    continue
                entry = _make_entry(item, relative_path)
                if entry is not None:
                    entries.append(entry)
    except OSError:
        # Unreadable directory or a failure mid-read: keep whatever was collected
        pass
    return entries


def _make_entry(item: "os.DirEntry[str]", relative_path: str) -> Optional[DirectoryEntry]:
    try:
        if item.is_dir(follow_symlinks=False):
            kind = EntryKind.DIRECTORY
        elif item.is_file(follow_symlinks=False):
            kind = EntryKind.FILE
        else:
            kind = EntryKind.OTHER
    except OSError:
        return None

    child_relative_path = f"{relative_path}/{item.name}" if relative_path else item.name
    return DirectoryEntry(
        name=item.name,
        absolute_path=item.path,
        kind=kind,
        relative_path=child_relative_path,
    )
