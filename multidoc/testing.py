"""Fixture loaders for test suites.

The ``must_*`` helpers wrap the core loaders and abort instead of raising,
so fixtures can be loaded in one line. What "abort" means is decided by
the abort handler, which defaults to exiting the process with the error
message and can be swapped with :func:`set_abort_handler` (for example to
``pytest.fail``).

ONLY FOR TEST USAGE.
"""

import logging
import sys
from collections.abc import MutableSequence
from typing import Any, Callable, List, NoReturn, Optional

from multidoc.core.errors import MultiDocError
from multidoc.core.loader import (
    PathLike,
    load_json,
    load_multi_yaml_or_json,
    load_yaml,
    read_file_bytes,
    read_file_text,
)

logger = logging.getLogger(__name__)

AbortHandler = Callable[[str], NoReturn]


def _exit_process(message: str) -> NoReturn:
    sys.exit(message)


_abort_handler: AbortHandler = _exit_process


def set_abort_handler(handler: Optional[AbortHandler]) -> AbortHandler:
    """Replace the abort handler used by the ``must_*`` loaders.

    Args:
        handler: Callable receiving the failure message; it must not
            return. None restores the default (exit the process).

    Returns:
        The previously installed handler, so callers can restore it
    """
    global _abort_handler
    previous = _abort_handler
    _abort_handler = handler if handler is not None else _exit_process
    return previous


def abort(message: str) -> NoReturn:
    """Abort through the current handler."""
    logger.error(message)
    _abort_handler(message)
    # handlers are required not to return
    raise AssertionError(f"abort handler returned: {message}")


def must_load_file_bytes(path: PathLike) -> bytes:
    """Load a file as bytes, aborting on failure."""
    try:
        return read_file_bytes(path)
    except MultiDocError as e:
        abort(f"load file failed, file path: {path}, err: {e}")


def must_load_file_string(path: PathLike) -> str:
    """Load a file as UTF-8 text, aborting on failure."""
    try:
        return read_file_text(path)
    except MultiDocError as e:
        abort(f"load file failed, file path: {path}, err: {e}")


def must_load_json(path: PathLike, target_type: Any = Any) -> Any:
    """Load a JSON file, aborting if it cannot be read or decoded."""
    try:
        return load_json(path, target_type)
    except MultiDocError as e:
        abort(f"load json file failed, file path: {path}, err: {e}")


def must_load_yaml(path: PathLike, target_type: Any = Any) -> Any:
    """Load a single-document YAML file, aborting on failure."""
    try:
        return load_yaml(path, target_type)
    except MultiDocError as e:
        abort(f"load yaml file failed, file path: {path}, err: {e}")


def must_load_multi_yaml_or_json(
    path: PathLike,
    target_type: Any = Any,
    into: Optional[MutableSequence] = None,
) -> List[Any]:
    """Load every document of a multi-document file, aborting on failure."""
    try:
        return load_multi_yaml_or_json(path, target_type, into)
    except MultiDocError as e:
        abort(f"load yaml file failed, file path: {path}, err: {e}")


def load_object_or_die(
    path: PathLike, target_type: Any = Any, *patches: Callable[[Any], Any]
) -> Any:
    """Load a YAML object and apply patches to it in order.

    A patch receives the object and may modify it in place or return a
    replacement; a None return keeps the current object.

    Example:
        >>> def with_namespace(obj):
        ...     obj["metadata"]["namespace"] = "default"
        >>> pod = load_object_or_die("pod.yaml", dict, with_namespace)
    """
    obj = must_load_yaml(path, target_type)
    for patch in patches:
        patched = patch(obj)
        if patched is not None:
            obj = patched
    return obj

