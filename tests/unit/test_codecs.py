"""Tests for the JSON and YAML text codecs."""

import json
from unittest.mock import patch

import pytest

from rulejson.ast import Undefined
from rulejson.codecs import JsonCodec, TextCodec, YamlCodec
from rulejson.exceptions import DependencyError, TextCodecError
from rulejson.options import SerializationOptions

RECORD = {"type": "predicate", "name": "eql?", "args": [("left", Undefined), ("right", "é")]}


@pytest.mark.unit
class TestJsonCodec:
    """Test the default JSON codec."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(JsonCodec(), TextCodec)

    def test_undefined_encodes_as_string_by_default(self) -> None:
        text = JsonCodec().encode(RECORD)
        assert json.loads(text)["args"] == [["left", "Undefined"], ["right", "é"]]

    def test_undefined_encodes_as_empty_object(self) -> None:
        text = JsonCodec(undefined_encoding="empty_object").encode(RECORD)
        assert json.loads(text)["args"][0] == ["left", {}]

    def test_compact_output_keeps_field_order(self) -> None:
        text = JsonCodec().encode({"type": "key", "path": "age", "rule": {}})
        assert text == '{"type": "key", "path": "age", "rule": {}}'

    def test_layout_options(self) -> None:
        codec = JsonCodec(indent=2, ensure_ascii=True, sort_keys=True)
        text = codec.encode({"type": "predicate", "name": "é", "args": []})

        assert "\n  " in text
        assert "\\u00e9" in text
        assert text.index('"args"') < text.index('"type"')

    def test_from_options(self) -> None:
        options = SerializationOptions(indent=4, sort_keys=True, undefined_encoding="empty_object")
        codec = JsonCodec.from_options(options)

        assert codec.indent == 4
        assert codec.sort_keys is True
        assert codec.undefined_encoding == "empty_object"
        assert "indent=4" in repr(codec)

    def test_decode(self) -> None:
        assert JsonCodec().decode('[{"type": "set", "rules": []}]') == [{"type": "set", "rules": []}]

    @pytest.mark.parametrize("text", ["{", "", "[1,]", None])
    def test_decode_errors(self, text: object) -> None:
        with pytest.raises(TextCodecError) as exc_info:
            JsonCodec().decode(text)  # type: ignore[arg-type]

        assert exc_info.value.codec_name == "json"
        assert exc_info.value.original_error is not None

    def test_encode_errors(self) -> None:
        with pytest.raises(TextCodecError) as exc_info:
            JsonCodec().encode({"value": object()})

        assert isinstance(exc_info.value.original_error, TypeError)


@pytest.mark.unit
class TestYamlCodec:
    """Test the PyYAML-backed codec."""

    def test_round_trip(self) -> None:
        pytest.importorskip("yaml")
        codec = YamlCodec()
        text = codec.encode(RECORD)

        assert "Undefined" in text
        assert codec.decode(text) == {
            "type": "predicate",
            "name": "eql?",
            "args": [["left", "Undefined"], ["right", "é"]],
        }

    def test_keeps_field_order(self) -> None:
        pytest.importorskip("yaml")
        text = YamlCodec().encode({"type": "key", "path": "age", "rule": {}})
        assert text.splitlines()[0] == "type: key"

    def test_undefined_as_empty_object(self) -> None:
        pytest.importorskip("yaml")
        codec = YamlCodec(undefined_encoding="empty_object")
        assert codec.decode(codec.encode({"value": Undefined})) == {"value": {}}

    def test_decode_errors(self) -> None:
        pytest.importorskip("yaml")
        with pytest.raises(TextCodecError) as exc_info:
            YamlCodec().decode("key: [unclosed")
        assert exc_info.value.codec_name == "yaml"

    def test_encode_errors(self) -> None:
        pytest.importorskip("yaml")
        with pytest.raises(TextCodecError):
            YamlCodec().encode({"value": object()})

    def test_missing_dependency(self) -> None:
        missing = ImportError("No module named 'yaml'")
        with patch("rulejson.utils.decorators.importlib.import_module", side_effect=missing):
            with pytest.raises(DependencyError) as exc_info:
                YamlCodec().decode("type: set")

        assert exc_info.value.component_name == "yaml"
        assert ("PyYAML", ">=6.0") in exc_info.value.missing_packages
