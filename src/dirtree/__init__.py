"""Directory tree rendering utilities.

This package renders a directory hierarchy as a text tree, similar to the
Unix ``tree`` command, either from the command line or as a library that
returns the tree as a string or writes it to any output sink.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

# Expose the version for both programmatic use and CLI
try:
    __version__ = _distribution_version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

from dirtree.config import Configuration, add_skip_directory, add_skip_file, init_config  # noqa: E402
from dirtree.dirtree import generate_string, print_to_sink, version  # noqa: E402
from dirtree.exceptions import (  # noqa: E402
    DirtreeError,
    ResolutionError,
    TargetNotADirectoryError,
    TraversalError,
)
from dirtree.types import EntryKind, TreeFormat  # noqa: E402

__all__ = [
    "Configuration",
    "DirtreeError",
    "EntryKind",
    "ResolutionError",
    "TargetNotADirectoryError",
    "TraversalError",
    "TreeFormat",
    "__version__",
    "add_skip_directory",
    "add_skip_file",
    "generate_string",
    "init_config",
    "print_to_sink",
    "version",
]
