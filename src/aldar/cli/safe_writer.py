"""Output sink for the aldar CLI.

This module provides an append-only writing interface over either an inherited
file descriptor (stdout) or a file created for the run.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from aldar.exceptions import OutputTargetError


class SafeWriter:
    """Append-only line sink for rendered output.

    The sink is chosen once per run: either an already open file descriptor, which
    is never closed by this class, or a path that is created (truncated) when the
    writer is constructed. Writes go straight to the descriptor in order, so output
    appears incrementally while the tree is walked.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path, str]):
        """Initialize the writer.

        Args:
            file: Either a file descriptor (int) or a path to create.

        Raises:
            OutputTargetError: If the output file cannot be created.
            TypeError: If ``file`` is neither a descriptor nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            # It's already a file descriptor
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            try:
                self._file_obj = path.open("w", encoding="utf-8")
            except OSError as e:
                raise OutputTargetError(str(path), e.strerror or str(e)) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write raw text.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If the reading end of a pipe was closed.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        payload = data.encode("utf-8", errors="replace")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_line(self, line: str) -> None:
        """Write one line followed by a newline."""
        self.write(line + "\n")

    def close(self) -> None:
        """Close the file if it was opened by this class.

        The writer is marked as closed even if closing fails with a broken pipe.
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

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, giving priority to an exception raised in the block."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
