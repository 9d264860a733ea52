"""Line scanning and separator detection for multi-document streams.

Documents are delimited by lines whose trimmed form starts with ``---``
followed by nothing or by a comment. This is looser than YAML's own
document marker rule so that streams of JSON documents joined with
``---`` keep loading.
"""

import io
import logging
from typing import BinaryIO, Iterator, Union

from multidoc.core.errors import InputUnavailableError, InvalidArgumentError

logger = logging.getLogger(__name__)

SEPARATOR = b"---"
COMMENT = b"#"

Source = Union[bytes, bytearray, memoryview, str, BinaryIO]


def is_separator(line: bytes) -> bool:
    """Check whether a line marks a document boundary.

    Args:
        line: One raw line, terminator and surrounding whitespace included

    Returns:
        True if the trimmed line is ``---`` optionally followed by a comment

    Example:
        >>> is_separator(b"--- # next\\n")
        True
        >>> is_separator(b"---foo\\n")
        False
    """
    trimmed = line.strip()
    if not trimmed.startswith(SEPARATOR):
        return False

    rest = trimmed[len(SEPARATOR):].strip()
    return not rest or rest.startswith(COMMENT)


def as_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """Normalize an in-memory input buffer to immutable bytes.

    Raises:
        InvalidArgumentError: If data is not bytes-like or str
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise InvalidArgumentError(
        f"input must be bytes-like or str, got {type(data).__name__}"
    )


def scan_lines(source: Source) -> Iterator[bytes]:
    """Yield the lines of an input buffer or binary stream.

    Each line ends at and includes ``\\n``; the last line may have no
    terminator. Lines are produced lazily, in order, one at a time.

    Args:
        source: In-memory buffer or readable binary stream

    Yields:
        Raw lines, unmodified

    Raises:
        InputUnavailableError: If reading the stream fails
        InvalidArgumentError: If source is neither bytes-like nor a stream
    """
    if hasattr(source, "readline"):
        stream = source
    else:
        stream = io.BytesIO(as_bytes(source))

    while True:
        try:
            line = stream.readline()
        except OSError as e:
            raise InputUnavailableError(f"read failed: {e}") from e

        if not line:
            return
        if not isinstance(line, bytes):
            raise InvalidArgumentError(
                f"stream must yield bytes, got {type(line).__name__}"
            )
        yield line
