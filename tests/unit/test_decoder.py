"""Tests for YAML-or-JSON document decoding."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytest
from pydantic import BaseModel, Field

from multidoc.core.decoder import (
    convert_value,
    decode_document,
    decode_documents,
    is_blank,
    looks_like_json,
    parse_document,
)
from multidoc.core.errors import DecodeError, InvalidArgumentError


@dataclass
class Deployment:
    """Dataclass target."""
    name: str
    replicas: int = 1


class ObjectMeta(BaseModel):
    name: str
    annotations: Dict[str, str] = {}


class KubeObject(BaseModel):
    """Pydantic target using the manifest's camelCase keys as aliases."""
    api_version: str = Field(alias="apiVersion")
    kind: str
    metadata: Optional[ObjectMeta] = None


class TestFormatDetection:
    """Tests for choosing between JSON and YAML."""

    def test_json_object_prefix(self):
        """Test documents starting with { are JSON."""
        assert looks_like_json(b'{"a": 1}')
        assert looks_like_json(b'\n  {"a": 1}\n')

    def test_yaml_documents(self):
        """Test everything else goes to YAML."""
        assert not looks_like_json(b"a: 1\n")
        assert not looks_like_json(b"- 1\n- 2\n")
        assert not looks_like_json(b"[1, 2]\n")

    def test_is_blank(self):
        """Test whitespace-only documents are blank."""
        assert is_blank(b"")
        assert is_blank(b" \n\t\r\n")
        assert not is_blank(b"# comment\n")


class TestParseDocument:
    """Tests for parsing documents into plain data."""

    def test_json(self):
        """Test JSON parsing."""
        assert parse_document(b'{"a": 1, "b": [true, null]}') == {"a": 1, "b": [True, None]}

    def test_yaml(self):
        """Test YAML parsing."""
        assert parse_document(b"b: 2\nc:\n  - x\n  - y\n") == {"b": 2, "c": ["x", "y"]}

    def test_yaml_flow_sequence(self):
        """Test a JSON-like array is read by the YAML parser."""
        assert parse_document(b"[1, 2, 3]\n") == [1, 2, 3]

    def test_comment_only_document(self):
        """Test a document with only comments parses to None."""
        assert parse_document(b"# nothing here\n") is None

    def test_first_inner_document_wins(self):
        """Test only the first YAML document of a chunk is decoded."""
        assert parse_document(b"a: 1\n--- {b: 2}\n") == {"a": 1}

    def test_yaml_flow_mapping(self):
        """Test a { document that is not JSON falls back to YAML."""
        assert parse_document(b"{a: 1, b: [x, y]}\n") == {"a": 1, "b": ["x", "y"]}

    def test_json_with_trailing_comment(self):
        """Test a JSON object followed by a comment line decodes as YAML."""
        assert parse_document(b'{"a": 1}\n# trailing note\n') == {"a": 1}

    def test_unquoted_keys_into_target(self):
        """Test the YAML fallback still fits the target type."""
        doc = b"{name: web, replicas: 2}\n"
        assert decode_document(doc, Deployment) == Deployment(name="web", replicas=2)

    def test_neither_json_nor_yaml(self):
        """Test a { document that fails both parsers reports both errors."""
        with pytest.raises(DecodeError) as exc_info:
            parse_document(b'{"a": ', index=3, line=7)

        assert exc_info.value.stage == "yaml"
        assert "as JSON:" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None
        assert exc_info.value.index == 3
        assert exc_info.value.line == 7

    def test_malformed_yaml(self):
        """Test invalid YAML raises a yaml stage DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            parse_document(b"foo: [1,2\n")

        assert exc_info.value.stage == "yaml"
        assert exc_info.value.__cause__ is not None

    def test_invalid_utf8_yaml(self):
        """Test undecodable bytes raise DecodeError."""
        with pytest.raises(DecodeError):
            parse_document(b"a: \xff\xfe\n")


class TestDecodeDocument:
    """Tests for fitting documents onto target types."""

    def test_any_target_returns_plain_data(self):
        """Test the default target keeps the parsed value."""
        assert decode_document(b"a: 1\n") == {"a": 1}

    def test_dict_target(self):
        """Test a dict target."""
        assert decode_document(b'{"a": 1}', dict) == {"a": 1}

    def test_dataclass_target(self):
        """Test decoding into a dataclass by field name."""
        result = decode_document(b"name: web\nreplicas: 3\n", Deployment)
        assert result == Deployment(name="web", replicas=3)

    def test_dataclass_defaults(self):
        """Test missing fields take their defaults."""
        assert decode_document(b'{"name": "web"}', Deployment) == Deployment(name="web")

    def test_model_target_with_aliases(self):
        """Test decoding into a pydantic model through key aliases."""
        doc = b"apiVersion: v1\nkind: Pod\nmetadata:\n  name: web\n"

        result = decode_document(doc, KubeObject)

        assert result.api_version == "v1"
        assert result.kind == "Pod"
        assert result.metadata.name == "web"

    def test_generic_container_target(self):
        """Test typing containers as targets."""
        assert decode_document(b"- 1\n- 2\n", List[int]) == [1, 2]

    def test_shape_mismatch(self):
        """Test a value that does not fit raises a convert stage DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode_document(b"name: [1]\n", Deployment, index=2)

        assert exc_info.value.stage == "convert"
        assert exc_info.value.index == 2

    def test_comment_only_document_builds_defaults(self):
        """Test an empty YAML document is treated as an empty mapping."""
        assert decode_document(b"# only a comment\n", dict) == {}

    def test_comment_only_document_any_target(self):
        """Test an empty YAML document stays None for Any."""
        assert decode_document(b"# only a comment\n", Any) is None

    def test_none_target_rejected(self):
        """Test a missing target type is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            decode_document(b"a: 1\n", None)

    def test_fresh_value_per_call(self):
        """Test each decode builds a new object."""
        first = decode_document(b"a: {b: 1}\n", dict)
        second = decode_document(b"a: {b: 1}\n", dict)

        assert first == second
        assert first is not second
        assert first["a"] is not second["a"]


class TestConvertValue:
    """Tests for convert_value."""

    def test_passthrough_for_any(self):
        """Test Any targets return the value unchanged."""
        value = {"a": 1}
        assert convert_value(value) is value

    def test_none_value_fits_defaults(self):
        """Test None is read as an empty mapping."""
        assert convert_value(None, Dict[str, int]) == {}


class TestDecodeDocuments:
    """Tests for decoding document lists."""

    def test_blank_documents_skipped(self):
        """Test whitespace-only documents produce no values."""
        docs = [b"a: 1\n", b"  \n\n", b'{"b": 2}\n']
        assert decode_documents(docs) == [{"a": 1}, {"b": 2}]

    def test_first_failure_stops(self):
        """Test decoding stops at the first bad document."""
        docs = [b"a: 1\n", b"  \n", b'{"bad": ', b"c: [\n"]

        with pytest.raises(DecodeError) as exc_info:
            decode_documents(docs, start_lines=[1, 3, 5, 7])

        assert exc_info.value.index == 2
        assert exc_info.value.line == 5
        assert exc_info.value.stage == "yaml"

    def test_no_documents(self):
        """Test an empty list decodes to nothing."""
        assert decode_documents([]) == []
