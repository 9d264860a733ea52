"""YAML-or-JSON decoding of assembled documents into a target type.

A document whose first non-whitespace byte is ``{`` is tried as JSON
first; anything that is not valid JSON is decoded as YAML with ruamel.yaml. The parsed value is then fitted
onto the caller's target type with pydantic, so dataclasses, TypedDicts,
BaseModels and plain containers all work as targets.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Iterable, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from multidoc.core.errors import DecodeError, InvalidArgumentError

logger = logging.getLogger(__name__)

JSON_PREFIX = b"{"


def _create_yaml_instance() -> YAML:
    """Create a ruamel.yaml loader for plain data.

    Returns:
        YAML instance using the safe, pure-Python loader so documents only
        ever produce dicts, lists and scalars
    """
    return YAML(typ="safe", pure=True)


@lru_cache(maxsize=128)
def _cached_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def _adapter_for(target_type: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target_type)
    except TypeError:
        # unhashable type expressions
        return TypeAdapter(target_type)


def is_blank(document: bytes) -> bool:
    """Return True if the document holds nothing but whitespace."""
    return not document.strip()


def looks_like_json(document: bytes) -> bool:
    """Return True if the document should be tried as JSON first."""
    return document.lstrip().startswith(JSON_PREFIX)


def parse_document(document: bytes, index: int = 0, line: Optional[int] = None) -> Any:
    """Parse one document into plain Python data.

    Args:
        document: Raw document bytes
        index: Position of the document in its stream, for error reports
        line: Line the document starts on, for error reports

    Returns:
        The parsed dict, list or scalar; None for a document without content

    Raises:
        DecodeError: If the document is neither valid JSON nor valid YAML
    """
    json_error = None
    if looks_like_json(document):
        try:
            return json.loads(document)
        except ValueError as e:
            # flow mappings and JSON with trailing comments are still YAML
            json_error = e
            logger.debug(f"Document {index} is not JSON, retrying as YAML: {e}")

    try:
        text = document.decode("utf-8")
        # a document may still hold several YAML documents ("--- !tag"
        # lines are content here); only the first one counts
        return next(iter(_create_yaml_instance().load_all(text)), None)
    except (YAMLError, UnicodeDecodeError) as e:
        message = str(e)
        if json_error is not None:
            message = f"{message} (as JSON: {json_error})"
        raise DecodeError(message, index=index, stage="yaml", line=line) from e


def decode_document(
    document: bytes,
    target_type: Any = Any,
    index: int = 0,
    line: Optional[int] = None,
) -> Any:
    """Decode one document into a fresh value of target_type.

    Args:
        document: Raw, non-blank document bytes
        target_type: Type the document is mapped onto (default: Any)
        index: Position of the document in its stream, for error reports
        line: Line the document starts on, for error reports

    Returns:
        Newly built value of target_type

    Raises:
        DecodeError: If parsing fails or the value does not fit target_type
        InvalidArgumentError: If target_type is None
    """
    value = parse_document(document, index=index, line=line)
    return convert_value(value, target_type, index=index, line=line)


def convert_value(
    value: Any,
    target_type: Any = Any,
    index: int = 0,
    line: Optional[int] = None,
) -> Any:
    """Fit parsed data onto target_type.

    An empty document (None) is treated as an empty mapping, so it builds
    the target type's defaults. Any targets get the parsed value as is.

    Raises:
        DecodeError: If the value does not fit target_type
    """
    if target_type is None:
        raise InvalidArgumentError("target type should not be None")
    if target_type is Any:
        return value
    if value is None:
        value = {}

    try:
        return _adapter_for(target_type).validate_python(value)
    except ValidationError as e:
        raise DecodeError(str(e), index=index, stage="convert", line=line) from e


def decode_documents(
    documents: Iterable[bytes],
    target_type: Any = Any,
    start_lines: Optional[Sequence[int]] = None,
) -> List[Any]:
    """Decode every non-blank document, stopping at the first failure.

    Args:
        documents: Raw documents in stream order
        target_type: Type each document is mapped onto (default: Any)
        start_lines: Starting line of each document, for error reports

    Returns:
        Decoded values in stream order, blank documents skipped

    Raises:
        DecodeError: On the first document that cannot be decoded
    """
    results = []
    for index, document in enumerate(documents):
        if is_blank(document):
            logger.debug(f"Skipping blank document {index}")
            continue
        line = start_lines[index] if start_lines is not None else None
        results.append(decode_document(document, target_type, index=index, line=line))
    return results
