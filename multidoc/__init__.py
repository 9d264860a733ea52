"""
multidoc: multi-document YAML/JSON loading

Splits a byte stream of concatenated YAML and/or JSON documents at ``---``
separator lines and decodes each non-empty document into a typed value.
JSON documents joined with ``---`` are accepted for backward compatibility.
"""

from multidoc.core.errors import (
    DecodeError,
    InputUnavailableError,
    InvalidArgumentError,
    MultiDocError,
)
from multidoc.core.loader import (
    load_json,
    load_multi_yaml_or_json,
    load_multi_yaml_or_json_from_bytes,
    load_yaml,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "load_json",
    "load_yaml",
    "load_multi_yaml_or_json",
    "load_multi_yaml_or_json_from_bytes",
    "MultiDocError",
    "InputUnavailableError",
    "InvalidArgumentError",
    "DecodeError",
]
