#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/serialization.py
"""Serialization pipelines for rule ASTs.

A :class:`Serialization` instance wires a compiler and a text codec around
the record conversions in :mod:`rulejson.ast.serialization` and exposes
four entry points:

- ``load(text)``: decode text, rebuild nodes, compile them
- ``dump(value)``: build records, encode them as text
- ``deserialize(*records)``: rebuild nodes from records, no compiler
- ``serialize(value)``: build records, no codec

Examples
--------
    >>> from rulejson import Serialization
    >>> serialization = Serialization()
    >>> text = '[{"type": "predicate", "name": "int?", "args": []}]'
    >>> serialization.load(text)
    Node(type='predicate', payload=('int?', []))
    >>> serialization.dump(serialization.load(text))
    '{"type": "predicate", "name": "int?", "args": []}'

Compilers and codecs are plain collaborators passed at construction:

    >>> from rulejson.codecs import YamlCodec
    >>> serialization = Serialization(compiler=my_compiler, codec=YamlCodec())

"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any, Callable

from rulejson.ast.nodes import Node, is_node_like
from rulejson.ast.schema import DEFAULT_SCHEMA, NodeSchema
from rulejson.ast.serialization import node_to_record, normalize_value
from rulejson.codecs import JsonCodec, TextCodec
from rulejson.options.serialization import SerializationOptions
from rulejson.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

Compiler = Callable[[Any], Any]


def identity_compiler(ast: Any) -> Any:
    """Return the AST unchanged; the default when no compiler is supplied."""
    return ast


def unsplat(value: Any) -> Any:
    """Collapse a one-element sequence to its element."""
    if isinstance(value, (list, tuple)) and not isinstance(value, Node) and len(value) == 1:
        return value[0]
    return value


def compose(*stages: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chain single-argument callables left to right.

    >>> compose(str.strip, str.upper)("  ok ")
    'OK'
    """

    def pipeline(value: Any) -> Any:
        return reduce(lambda acc, stage: stage(acc), stages, value)

    return pipeline


class Serialization:
    """Load and dump rule ASTs through a compiler and a text codec.

    Parameters
    ----------
    compiler : callable, optional
        ``compile(ast) -> rule(s)``, called once per ``load`` with the
        normalized top-level value. Defaults to :func:`identity_compiler`.
    codec : TextCodec, optional
        Object with ``encode`` and ``decode``. Defaults to a
        :class:`~rulejson.codecs.JsonCodec` configured from ``options``.
    options : SerializationOptions, optional
        Strictness and JSON layout options
    schema : NodeSchema, optional
        Node schema, defaults to :data:`~rulejson.ast.schema.DEFAULT_SCHEMA`

    Notes
    -----
    Errors from the compiler and codec propagate unchanged. Instances hold
    no mutable state and can be shared between threads.

    """

    def __init__(
        self,
        compiler: Compiler | None = None,
        codec: TextCodec | None = None,
        options: SerializationOptions | None = None,
        schema: NodeSchema | None = None,
    ) -> None:
        self._options = options if options is not None else SerializationOptions()
        self._compiler = compiler if compiler is not None else identity_compiler
        self._codec = codec if codec is not None else JsonCodec.from_options(self._options)
        self._schema = schema if schema is not None else DEFAULT_SCHEMA

        self._deserializer = compose(self._normalize, unsplat)
        self._serializer = self._build_records
        self._loader = compose(self._codec.decode, self._normalize, self._compiler, unsplat)
        self._dumper = compose(self._serializer, self._codec.encode)

    @property
    def compiler(self) -> Compiler:
        return self._compiler

    @property
    def codec(self) -> TextCodec:
        return self._codec

    @property
    def options(self) -> SerializationOptions:
        return self._options

    @property
    def schema(self) -> NodeSchema:
        return self._schema

    @property
    def deserializer(self) -> Callable[[Any], Any]:
        """Records (or a list of them) to nodes, without the compiler."""
        return self._deserializer

    @property
    def serializer(self) -> Callable[[Any], Any]:
        """Exportable value (or a list of them) to records."""
        return self._serializer

    @property
    def loader(self) -> Callable[[str], Any]:
        """Text to compiled rules."""
        return self._loader

    @property
    def dumper(self) -> Callable[[Any], str]:
        """Exportable value to text."""
        return self._dumper

    def _normalize(self, value: Any) -> Any:
        return normalize_value(value, schema=self._schema, strict_mode=self._options.strict_mode)

    def _build_records(self, value: Any) -> Any:
        if isinstance(value, (list, tuple)) and not is_node_like(value):
            return [node_to_record(item, self._schema) for item in value]
        return node_to_record(value, self._schema)

    def load(self, text: str) -> Any:
        """Decode text and compile the rules it describes.

        Parameters
        ----------
        text : str
            Encoded record or list of records

        Returns
        -------
        any
            Compiler output; a one-element list is returned as its element

        Raises
        ------
        TextCodecError
            If the codec cannot decode the text
        SchemaError
            If a record does not match the node schema

        """
        with debug_timer(logger, "Loading rules"):
            return self._loader(text)

    def dump(self, value: Any) -> str:
        """Encode an exportable value (or a list of them) as text.

        Raises
        ------
        SchemaError
            If an exported node does not match the node schema
        TextCodecError
            If the codec cannot encode the records

        """
        with debug_timer(logger, "Dumping rules"):
            return self._dumper(value)

    def deserialize(self, *values: Any) -> Any:
        """Rebuild raw AST nodes from records.

        >>> Serialization().deserialize({"type": "predicate", "name": "nil?", "args": []})
        Node(type='predicate', payload=('nil?', []))
        """
        return self._deserializer(list(values))

    def serialize(self, value: Any) -> Any:
        """Build the record (or list of records) for an exportable value."""
        return self._serializer(value)

    def __repr__(self) -> str:
        return f"Serialization(compiler={self._compiler!r}, codec={self._codec!r}, options={self._options!r})"


__all__ = ["Serialization", "Compiler", "identity_compiler", "unsplat", "compose"]
