"""Tests for serialization options."""

from dataclasses import FrozenInstanceError

import pytest

from rulejson.options import SerializationOptions


@pytest.mark.unit
class TestSerializationOptions:
    """Test option defaults and validation."""

    def test_defaults(self) -> None:
        options = SerializationOptions()

        assert options.strict_mode is False
        assert options.indent is None
        assert options.ensure_ascii is False
        assert options.sort_keys is False
        assert options.undefined_encoding == "string"

    def test_frozen(self) -> None:
        options = SerializationOptions()
        with pytest.raises(FrozenInstanceError):
            options.indent = 2  # type: ignore[misc]

    def test_create_updated(self) -> None:
        options = SerializationOptions(indent=2)
        updated = options.create_updated(strict_mode=True)

        assert updated.strict_mode is True
        assert updated.indent == 2
        assert options.strict_mode is False

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError, match="indent"):
            SerializationOptions(indent=-1)

    def test_unknown_undefined_encoding_rejected(self) -> None:
        with pytest.raises(ValueError, match="undefined_encoding"):
            SerializationOptions(undefined_encoding="null")  # type: ignore[arg-type]

    def test_create_updated_validates(self) -> None:
        with pytest.raises(ValueError):
            SerializationOptions().create_updated(indent=-4)
