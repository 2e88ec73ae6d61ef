from enum import Enum
from os import PathLike
from typing import Protocol, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds produced while listing a directory.

    Entries are classified by their own type, never by the type of a symlink's
    target, so a symlink pointing at a directory is ``OTHER``.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory (never a symlink)
        OTHER: Symbolic links, sockets, FIFOs, device nodes and the like
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class TreeFormat(str, Enum):
    """Glyph set used to draw tree connectors.

    Values:
        ASCII: ``|--``, ``+--`` and ``|`` connectors, safe for any terminal
        UNICODE: box-drawing connectors (``├──``, ``└──``, ``│``)
    """

    ASCII = "ascii"
    UNICODE = "unicode"


class Sink(Protocol):
    """Anything text can be written to: open files, ``io.StringIO``, ``sys.stdout``."""

    def write(self, data: str) -> object: ...
