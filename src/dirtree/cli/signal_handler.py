"""Signal handling utilities for the dirtree CLI.

SIGPIPE (closed output pipe) and SIGINT (Ctrl+C) are recorded instead of
killing the process, so the tree walk stops at the next write and the CLI
exits with the conventional status code. SIGPIPE does not exist on Windows;
there only SIGINT is handled.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)

# Shell convention: 128 + signal number
EXIT_BROKEN_PIPE = 141
EXIT_INTERRUPTED = 130


class SignalHandler:
    """Records SIGPIPE and SIGINT so the CLI can wind down cleanly.

    Attributes:
        sigpipe_received: Event set when SIGPIPE arrives.
        sigint_received: Event set when SIGINT arrives.
        original_sigpipe_handler: Handler in place before ours (None without SIGPIPE).
        original_sigint_handler: Handler in place before ours.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record SIGPIPE and restore the previous handler."""
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record SIGINT and restore the previous handler, so a second Ctrl+C interrupts immediately."""
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Whether output should stop because SIGPIPE or SIGINT arrived."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_status(self) -> Optional[int]:
        """Return the conventional exit status for the signal received, if any.

        A broken pipe takes precedence over an interrupt.

        Example:
            >>> handler = SignalHandler()
            >>> handler.exit_status() is None
            True
            >>> handler.sigint_received.set()
            >>> handler.exit_status()
            130
        """
        if self.sigpipe_received.is_set():
            return EXIT_BROKEN_PIPE
        if self.sigint_received.is_set():
            return EXIT_INTERRUPTED
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers for SIGPIPE (where available) and SIGINT."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Cleanup function registered with atexit.

    After SIGPIPE or SIGINT, stdout is pointed at the null device so that the
    interpreter's final flush does not print another error.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
