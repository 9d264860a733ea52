"""
Core splitting and decoding pipeline.

Scanner -> Assembler -> Decoder, plus the loaders that chain them and the
exceptions they raise.
"""

from multidoc.core.assembler import DocumentAssembler, split_documents
from multidoc.core.decoder import decode_document, decode_documents
from multidoc.core.scanner import is_separator, scan_lines

__all__ = [
    "is_separator",
    "scan_lines",
    "DocumentAssembler",
    "split_documents",
    "decode_document",
    "decode_documents",
]
