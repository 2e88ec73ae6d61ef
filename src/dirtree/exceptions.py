class DirtreeError(Exception):
    """Base class for all errors raised by dirtree.

    Per-entry I/O failures met during a walk (an unreadable child, a
    subdirectory that cannot be opened) are not errors: those entries are
    simply left out of the tree. Only failures concerning the root of a
    traversal are reported through this hierarchy.
    """

    pass


class ResolutionError(DirtreeError):
    """
    Exception raised when a path cannot be turned into a canonical absolute path.

    This happens when the path does not exist, when a component of it cannot be
    accessed, or when resolving it runs into a symlink loop.

    Attributes:
        path (str): The path as given by the caller.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = ResolutionError("/no/such/dir", "No such file or directory")
        >>> str(error)
        "Cannot resolve path '/no/such/dir': No such file or directory"
        >>> error.path
        '/no/such/dir'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the offending path and the failure reason.

        Args:
            path (str): The path that could not be resolved.
            reason (str): Why resolution failed.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path '{path}': {reason}")


class TargetNotADirectoryError(DirtreeError, NotADirectoryError):
    """
    Exception raised when the root of a traversal exists but is not a directory.

    It also derives from the built-in ``NotADirectoryError`` so callers that only
    know about the standard exception still catch it.

    Attributes:
        path (str): The path that was expected to be a directory.

    Example:
        >>> error = TargetNotADirectoryError("/etc/hostname")
        >>> str(error)
        "'/etc/hostname' is not a directory"
        >>> isinstance(error, NotADirectoryError)
        True
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"'{path}' is not a directory")


class TraversalError(DirtreeError):
    """
    Exception raised by the string-producing API when the traversal cannot start.

    It is always chained to the underlying ``ResolutionError`` or
    ``TargetNotADirectoryError`` (available as ``__cause__``).

    Example:
        >>> error = TraversalError("Cannot generate tree for 'missing'")
        >>> str(error)
        "Cannot generate tree for 'missing'"
    """

    pass
