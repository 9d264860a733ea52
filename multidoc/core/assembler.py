"""Grouping of scanned lines into documents."""

import logging
from typing import List

from multidoc.core.scanner import Source, is_separator, scan_lines

logger = logging.getLogger(__name__)

_INITIAL_CAPACITY = 4096


class DocumentAssembler:
    """Accumulate content lines and cut documents at separator lines.

    The assembler owns a single reusable buffer. When a document is closed
    its bytes are copied out, so closed documents never change when the
    buffer is reused for the next one.

    Attributes:
        documents: Closed, non-empty documents in input order
        start_lines: 1-based line number each document starts on

    Example:
        >>> assembler = DocumentAssembler()
        >>> for line in [b"a: 1\\n", b"---\\n", b"b: 2\\n"]:
        ...     assembler.feed(line)
        >>> assembler.close()
        [b'a: 1\\n', b'b: 2\\n']
    """

    def __init__(self) -> None:
        self.documents: List[bytes] = []
        self.start_lines: List[int] = []
        self._buffer = bytearray()
        self._line_no = 0
        self._buffer_start = 0

    def feed(self, line: bytes) -> None:
        """Classify one line and either cut a document or accumulate it."""
        self._line_no += 1
        if is_separator(line):
            self._flush()
            return

        if not self._buffer:
            self._buffer_start = self._line_no
        self._buffer.extend(line)

    def close(self) -> List[bytes]:
        """Flush the trailing document and return all documents."""
        self._flush()
        return self.documents

    def _flush(self) -> None:
        if not self._buffer:
            return
        self.documents.append(bytes(self._buffer))
        self.start_lines.append(self._buffer_start)
        logger.debug(
            f"Closed document {len(self.documents) - 1} "
            f"(line {self._buffer_start}, {len(self._buffer)} bytes)"
        )
        self._buffer.clear()


def assemble(source: Source) -> DocumentAssembler:
    """Run the assembler over every line of source and close it."""
    assembler = DocumentAssembler()
    for line in scan_lines(source):
        assembler.feed(line)
    assembler.close()
    return assembler


def split_documents(source: Source) -> List[bytes]:
    """Split a multi-document stream into raw document bytes.

    Leading, trailing and consecutive separators produce no empty
    documents. A last document without a closing separator is kept.

    Args:
        source: In-memory buffer or readable binary stream

    Returns:
        List of documents, each the exact bytes of its content lines
    """
    return assemble(source).documents
