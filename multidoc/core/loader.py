"""Public loaders for multi-document YAML/JSON input.

For historical reasons these loaders accept streams of JSON documents
separated by ``---`` even though that is not a JSON construct, so the
input is split line by line instead of handing it to a YAML
multi-document parser.
"""

import json
import logging
from collections.abc import MutableSequence
from pathlib import Path
from typing import Any, List, Optional, Union

from multidoc.core.assembler import assemble
from multidoc.core.decoder import convert_value, decode_document, decode_documents
from multidoc.core.errors import DecodeError, InputUnavailableError, InvalidArgumentError
from multidoc.core.scanner import Source

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_file_bytes(path: PathLike) -> bytes:
    """Read a whole file into memory.

    Raises:
        InputUnavailableError: If the file cannot be read in full
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputUnavailableError(f"read {path}: {e}", path=str(path)) from e


def read_file_text(path: PathLike) -> str:
    """Read a whole file as UTF-8 text.

    Raises:
        InputUnavailableError: If the file cannot be read or is not UTF-8
    """
    data = read_file_bytes(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputUnavailableError(f"read {path}: {e}", path=str(path)) from e


def _check_into(into: Optional[MutableSequence]) -> None:
    if into is not None and not isinstance(into, MutableSequence):
        raise InvalidArgumentError(
            f"output collection must be a mutable sequence, got {type(into).__name__}"
        )


def load_multi_yaml_or_json_from_bytes(
    data: Source,
    target_type: Any = Any,
    into: Optional[MutableSequence] = None,
) -> List[Any]:
    """Decode every document of a multi-document YAML/JSON stream.

    The stream is split at separator lines (``---`` optionally followed by
    a comment), blank documents are skipped and each remaining document
    is decoded as JSON or YAML into a fresh target_type value.

    Loading is all or nothing: when into is given, the decoded values are
    appended to it only after every document decoded successfully.

    Args:
        data: Input buffer or readable binary stream
        target_type: Type each document is mapped onto (default: Any)
        into: Optional caller collection to append the results to

    Returns:
        Decoded values in stream order

    Raises:
        InvalidArgumentError: If into is not a mutable sequence or
            target_type is None
        InputUnavailableError: If reading a stream fails
        DecodeError: On the first document that cannot be decoded

    Example:
        >>> load_multi_yaml_or_json_from_bytes(b'{"a": 1}\\n---\\nb: 2\\n')
        [{'a': 1}, {'b': 2}]
    """
    _check_into(into)
    if target_type is None:
        raise InvalidArgumentError("target type should not be None")

    assembler = assemble(data)
    results = decode_documents(assembler.documents, target_type, assembler.start_lines)
    logger.debug(
        f"Decoded {len(results)} of {len(assembler.documents)} documents"
    )

    if into is not None:
        into.extend(results)
    return results


def load_multi_yaml_or_json(
    path: PathLike,
    target_type: Any = Any,
    into: Optional[MutableSequence] = None,
) -> List[Any]:
    """Read a file and decode every document it contains.

    See :func:`load_multi_yaml_or_json_from_bytes` for the decoding rules.

    Raises:
        InvalidArgumentError: If into is not a mutable sequence
        InputUnavailableError: If the file cannot be read
        DecodeError: On the first document that cannot be decoded; the
            error's ``path`` is set to the file
    """
    _check_into(into)
    data = read_file_bytes(path)
    try:
        results = load_multi_yaml_or_json_from_bytes(data, target_type, into)
    except DecodeError as e:
        e.path = str(path)
        raise
    logger.info(f"Loaded {len(results)} documents from {path}")
    return results


def load_json(path: PathLike, target_type: Any = Any) -> Any:
    """Load a single JSON document from a file.

    Raises:
        InputUnavailableError: If the file cannot be read
        DecodeError: If the file is not valid JSON or does not fit target_type
    """
    data = read_file_bytes(path)
    try:
        value = json.loads(data)
    except ValueError as e:
        raise DecodeError(str(e), index=0, stage="json", path=str(path)) from e
    try:
        return convert_value(value, target_type)
    except DecodeError as e:
        e.path = str(path)
        raise


def load_yaml(path: PathLike, target_type: Any = Any) -> Any:
    """Load a single YAML (or JSON) document from a file.

    Raises:
        InputUnavailableError: If the file cannot be read
        DecodeError: If the file cannot be decoded or does not fit target_type
    """
    data = read_file_bytes(path)
    try:
        return decode_document(data, target_type, line=1)
    except DecodeError as e:
        e.path = str(path)
        raise
