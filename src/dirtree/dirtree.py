"""Library entry points for rendering directory trees.

These functions are the embeddable surface of dirtree: build a
configuration, then either get the tree as a string or write it to any
sink. Root failures surface as exceptions (``generate_string``) or as a
``False`` return value (``print_to_sink``); the host process is never
terminated.

Example:
    >>> import io, os, tempfile
    >>> from dirtree.config import add_skip_directory, init_config
    >>> from dirtree.types import TreeFormat
    >>> config = init_config()
    >>> config.format = TreeFormat.UNICODE
    >>> add_skip_directory(config, "build")
    >>> with tempfile.TemporaryDirectory() as tmpdir:
    ...     root = os.path.join(tmpdir, "proj")
    ...     for name in ("a", "build", ".git", "node_modules"):
    ...         os.makedirs(os.path.join(root, name))
    ...     open(os.path.join(root, "b.txt"), "w").close()
    ...     print(generate_string(root, config), end="")
    proj
    ├── a
    └── b.txt
"""

from typing import Optional

from dirtree import __version__
from dirtree.config import Configuration, init_config
from dirtree.exceptions import ResolutionError, TargetNotADirectoryError, TraversalError
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.file_system_tree.tree_renderer import TreeRenderer
from dirtree.types import PathType, Sink


def generate_string(
    path: PathType,
    config: Optional[Configuration] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> str:
    """Render the tree rooted at a directory into a string.

    The result holds the root's name followed by every rendered line, each
    terminated by a newline. Identical input on an unchanged filesystem always
    gives identical output.

    Args:
        path: Directory to render. Can be any path-like object.
        config: Traversal configuration. Defaults to ``init_config()``.
        exclusion_rules: Optional extra rules, e.g. GitIgnoreExclusionRules.

    Returns:
        The complete tree as a string.

    Raises:
        TraversalError: If the root cannot be resolved or is not a directory. The
            underlying error is chained as ``__cause__``.
    """
    renderer = TreeRenderer(config if config is not None else init_config(), exclusion_rules)
    try:
        lines = renderer.stream_lines(path)
    except (ResolutionError, TargetNotADirectoryError) as e:
        raise TraversalError(f"Cannot generate tree for '{path}': {e}") from e
    return "".join(line + "\n" for line in lines)


def print_to_sink(
    sink: Sink,
    path: PathType,
    config: Optional[Configuration] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> bool:
    """Render the tree rooted at a directory and write it to a sink.

    The tree is generated completely before anything is written, so a failing
    root leaves the sink untouched.

    Args:
        sink: Any object with a ``write(str)`` method (open file, StringIO, stdout).
        path: Directory to render.
        config: Traversal configuration. Defaults to ``init_config()``.
        exclusion_rules: Optional extra rules, e.g. GitIgnoreExclusionRules.

    Returns:
        True on success; False if generation or the write failed, including
        when the sink only accepts bytes.

    Example:
        >>> import io
        >>> print_to_sink(io.StringIO(), "/no/such/directory")
        False
    """
    try:
        text = generate_string(path, config, exclusion_rules)
    except TraversalError:
        return False

    try:
        sink.write(text)
    except (OSError, TypeError, ValueError):
        # ValueError: closed file objects. TypeError: binary sinks such as io.BytesIO
        return False
    return True


def version() -> str:
    """Return the installed version of dirtree, or "unknown" if it isn't installed."""
    return __version__
