"""Signal-aware output sink for the dirtree CLI.

Tree lines are written straight to a file descriptor so that a closed pipe
(``dirtree | head``) or Ctrl+C stops output promptly instead of producing a
traceback.
"""

import errno
import os
import types
from pathlib import Path
from typing import IO, Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Output sink that writes to a file descriptor or a file path.

    Instances satisfy the ``Sink`` protocol and can be handed directly to
    ``TreeRenderer.render``.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
        encoding: Text encoding used for written data.
        errors: Encoding error handler. The default, ``surrogateescape``, writes file
            names that are not valid in the encoding back out as their original bytes.
    """

    def __init__(
        self, file: Union[int, str, "os.PathLike[str]"], encoding: str = "utf-8", errors: str = "surrogateescape"
    ):
        """Initialize the safe writer.

        Args:
            file: A file descriptor (int), or a path to create/truncate for writing.
            encoding: Encoding for the text written. Defaults to UTF-8.
            errors: Error handler used when encoding. Defaults to ``surrogateescape``.

        Raises:
            TypeError: If file is neither an int nor a path.
        """
        self.file = file
        self.encoding = encoding
        self.errors = errors
        self._closed = False
        self._file_obj: Optional[IO[str]]

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding=encoding, errors=errors)
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> int:
        """Write text, checking for pending SIGPIPE/SIGINT first.

        Args:
            data: Text to write.

        Returns:
            Number of characters written.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode(self.encoding, self.errors)
        try:
            # os.write may write partially on pipes
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise
        return len(data)

    def close(self) -> None:
        """Close the underlying file if this writer opened it.

        Broken pipe errors during close are tolerated; the writer is marked
        closed either way. Descriptors passed in by the caller are left open.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
