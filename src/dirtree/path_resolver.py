"""Canonicalization of paths into stable identity keys."""

from pathlib import Path

from dirtree.exceptions import ResolutionError
from dirtree.types import PathType


def resolve(path: PathType) -> str:
    """Resolve a path to its canonical absolute form.

    Symbolic links are followed and ``.``/``..`` segments are collapsed, so two
    spellings of the same directory resolve to the same string.

    Args:
        path: The path to resolve. Can be any path-like object.

    Returns:
        The canonical absolute path as a string.

    Raises:
        ResolutionError: If the path does not exist, cannot be accessed, is
            malformed (e.g. contains a NUL byte), or resolving it loops through symlinks.

    Example:
        >>> import os, tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     resolve(os.path.join(tmpdir, ".")) == os.path.realpath(tmpdir)
        True
        >>> resolve("/definitely/not/here")  # doctest: +ELLIPSIS
        Traceback (most recent call last):
            ...
        dirtree.exceptions.ResolutionError: Cannot resolve path '/definitely/not/here': ...
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError, ValueError) as e:
        # RuntimeError: symlink loops on older Pythons. ValueError: embedded NUL bytes
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise ResolutionError(str(path), reason) from e
