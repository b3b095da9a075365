"""Signal handling for the dir2tree CLI.

SIGINT (Ctrl+C) and, where the platform has it, SIGPIPE (reader of a pipe went away)
are recorded rather than acted upon immediately. The writer checks the recorded state
before each write and the entry point turns it into the conventional exit code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

SIGPIPE = getattr(signal, "SIGPIPE", None)

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so the render can stop cleanly.

    Each handler restores the original disposition after the first signal, so a second
    Ctrl+C falls back to the default behavior.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been received.
        sigint_received: Set once SIGINT has been received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signum, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signum, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Return True if either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Return the exit code implied by the received signals, or None."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers of the shared SignalHandler."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Keeps the interpreter from reporting a failed flush of stdout during shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
