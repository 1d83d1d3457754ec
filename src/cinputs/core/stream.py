"""Line reading and the shared standard-input handle."""

from __future__ import annotations

import logging
import sys
import threading
from typing import IO, Any

from cinputs.models.errors import ConstrainedInputError, ErrorKind
from cinputs.protocols import LineReaderProtocol

logger = logging.getLogger(__name__)

_stdin: IO[Any] | None = None
_stdin_lock = threading.Lock()


def get_stdin() -> IO[Any]:
    """Get the process-wide standard-input handle.

    The handle is taken from ``sys.stdin`` on first use and reused for the
    rest of the process.

    Returns:
        The shared stdin stream.
    """
    global _stdin
    if _stdin is None:
        with _stdin_lock:
            if _stdin is None:
                logger.debug("Acquiring shared stdin handle")
                _stdin = sys.stdin
    return _stdin


def reset_stdin() -> None:
    """Forget the shared stdin handle so the next use re-acquires it."""
    global _stdin
    with _stdin_lock:
        _stdin = None


def strip_line_terminator(line: str) -> str:
    """Remove a single trailing ``\\n`` or ``\\r\\n``."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def read_line(reader: LineReaderProtocol, encoding: str = "utf-8") -> str:
    """Read one line from a text or binary stream.

    Args:
        reader: Line source whose ``readline()`` returns str or bytes.
        encoding: Encoding used to decode bytes lines.

    Returns:
        The line without its line terminator.

    Raises:
        ConstrainedInputError: Kind IO, if the read fails, the bytes cannot be
            decoded, or the stream is already at its end.
    """
    try:
        raw = reader.readline()
    except (OSError, ValueError) as e:
        # ValueError covers reads from closed files
        raise ConstrainedInputError.from_os_error(e) from e

    if not raw:
        raise ConstrainedInputError.create(
            ErrorKind.IO,
            "end_of_stream",
            "Failed to read input: end of stream reached",
        )

    if isinstance(raw, bytes):
        try:
            raw = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise ConstrainedInputError.create(
                ErrorKind.IO,
                "decode_error",
                "Failed to read input: stream did not contain valid {encoding}",
                encoding=encoding,
            ) from e

    return strip_line_terminator(raw)
