"""Signal-aware output for the dir2tree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dir2tree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a file descriptor or a file, stopping after an interruption.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the writer.

        Args:
            file: A file descriptor (such as ``sys.stdout.fileno()``) or a path to a file
                that is created or truncated.

        Raises:
            TypeError: If ``file`` is neither an int nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` encoded as UTF-8. Characters that cannot be encoded become ``?``.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8", errors="replace")
        try:
            # os.write may write only part of the payload
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it. Closing twice is harmless."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise
