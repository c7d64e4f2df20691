#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/codecs.py
"""Text codecs turning records into text and back.

A codec is any object with ``encode(value) -> str`` and
``decode(text) -> value``. :class:`JsonCodec` is the default and uses the
standard library ``json`` module; :class:`YamlCodec` uses PyYAML, which is
an optional dependency checked on first use.

Both codecs write the ``Undefined`` token in its canonical text form, the
string ``"Undefined"``, unless configured to write an empty object.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Protocol, runtime_checkable

from rulejson.ast.nodes import UndefinedType
from rulejson.constants import (
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_SORT_KEYS,
    DEFAULT_UNDEFINED_ENCODING,
    UNDEFINED_TOKEN,
    UndefinedEncoding,
)
from rulejson.exceptions import TextCodecError
from rulejson.options.serialization import SerializationOptions
from rulejson.utils.decorators import requires_dependencies

DEPS_YAML = [("PyYAML", "yaml", ">=6.0")]


@runtime_checkable
class TextCodec(Protocol):
    """Call contract for text codecs plugged into a serialization pipeline."""

    def encode(self, value: Any) -> str:
        """Encode a record (or list of records) as text."""
        ...

    def decode(self, text: str) -> Any:
        """Decode text into generic values (mappings, lists, scalars)."""
        ...


def _undefined_text_value(undefined_encoding: UndefinedEncoding) -> Any:
    return {} if undefined_encoding == "empty_object" else UNDEFINED_TOKEN


class JsonCodec:
    """JSON text codec backed by the standard library.

    Parameters
    ----------
    indent : int or None, default None
        Indentation for pretty output, None for compact output
    ensure_ascii : bool, default False
        Escape non-ASCII characters
    sort_keys : bool, default False
        Sort object keys instead of keeping schema field order
    undefined_encoding : {"string", "empty_object"}, default "string"
        Text form written for ``Undefined``

    """

    name = "json"

    def __init__(
        self,
        indent: int | None = DEFAULT_JSON_INDENT,
        ensure_ascii: bool = DEFAULT_JSON_ENSURE_ASCII,
        sort_keys: bool = DEFAULT_JSON_SORT_KEYS,
        undefined_encoding: UndefinedEncoding = DEFAULT_UNDEFINED_ENCODING,
    ) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.sort_keys = sort_keys
        self.undefined_encoding = undefined_encoding

    @classmethod
    def from_options(cls, options: SerializationOptions) -> JsonCodec:
        """Create a codec configured from serialization options."""
        return cls(
            indent=options.indent,
            ensure_ascii=options.ensure_ascii,
            sort_keys=options.sort_keys,
            undefined_encoding=options.undefined_encoding,
        )

    def _default(self, value: Any) -> Any:
        if isinstance(value, UndefinedType):
            return _undefined_text_value(self.undefined_encoding)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    def encode(self, value: Any) -> str:
        """Encode a value as JSON text.

        Raises
        ------
        TextCodecError
            If the value contains objects JSON cannot represent

        """
        try:
            return json.dumps(
                value,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
                sort_keys=self.sort_keys,
                default=self._default,
            )
        except (TypeError, ValueError) as e:
            raise TextCodecError(f"Cannot encode value as JSON: {e}", codec_name=self.name, original_error=e) from e

    def decode(self, text: str) -> Any:
        """Decode JSON text.

        Raises
        ------
        TextCodecError
            If the text is not valid JSON

        """
        try:
            return json.loads(text)
        except (TypeError, ValueError) as e:
            raise TextCodecError(f"Invalid JSON input: {e}", codec_name=self.name, original_error=e) from e

    def __repr__(self) -> str:
        return (
            f"JsonCodec(indent={self.indent!r}, ensure_ascii={self.ensure_ascii!r}, "
            f"sort_keys={self.sort_keys!r}, undefined_encoding={self.undefined_encoding!r})"
        )


class YamlCodec:
    """YAML text codec backed by PyYAML.

    Only the safe loader and dumper are used. Tuples are written as
    sequences and ``Undefined`` in its configured text form.

    Parameters
    ----------
    undefined_encoding : {"string", "empty_object"}, default "string"
        Text form written for ``Undefined``
    sort_keys : bool, default False
        Sort mapping keys instead of keeping schema field order

    """

    name = "yaml"

    def __init__(
        self,
        undefined_encoding: UndefinedEncoding = DEFAULT_UNDEFINED_ENCODING,
        sort_keys: bool = DEFAULT_JSON_SORT_KEYS,
    ) -> None:
        self.undefined_encoding = undefined_encoding
        self.sort_keys = sort_keys

    def _to_plain(self, value: Any) -> Any:
        if isinstance(value, UndefinedType):
            return _undefined_text_value(self.undefined_encoding)
        if isinstance(value, Mapping):
            return {key: self._to_plain(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._to_plain(item) for item in value]
        return value

    @requires_dependencies("yaml", DEPS_YAML)
    def encode(self, value: Any) -> str:
        """Encode a value as YAML text.

        Raises
        ------
        TextCodecError
            If the value contains objects the safe dumper cannot represent

        """
        import yaml

        try:
            return yaml.safe_dump(
                self._to_plain(value), sort_keys=self.sort_keys, allow_unicode=True, default_flow_style=False
            )
        except yaml.YAMLError as e:
            raise TextCodecError(f"Cannot encode value as YAML: {e}", codec_name=self.name, original_error=e) from e

    @requires_dependencies("yaml", DEPS_YAML)
    def decode(self, text: str) -> Any:
        """Decode YAML text.

        Raises
        ------
        TextCodecError
            If the text is not valid YAML

        """
        import yaml

        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise TextCodecError(f"Invalid YAML input: {e}", codec_name=self.name, original_error=e) from e


__all__ = ["TextCodec", "JsonCodec", "YamlCodec"]
