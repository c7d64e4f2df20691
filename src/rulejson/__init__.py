"""rulejson - JSON serialization for logical rule ASTs.

rulejson converts rule expressions (boolean combinators, quantifiers,
path-scoped rules and predicates) between an in-memory AST and flat,
JSON-shaped records, and from there to text through a pluggable codec.

Key Features
------------
- One declarative node schema drives both directions
- Exact round trips: records rebuild the nodes they came from
- ``Undefined`` as a first-class "no value" token in text
- Pluggable compiler and text codec (JSON by default, YAML optional)

Examples
--------
Round trip a rule through JSON text:

    >>> from rulejson import Node, Serialization, predicate
    >>> rule = Node("key", ("age", predicate("gt?", ("num", 18))))
    >>> serialization = Serialization()
    >>> text = serialization.dump(rule)
    >>> serialization.load(text) == rule
    True

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from rulejson.ast import (
    DEFAULT_SCHEMA,
    NODE_FIELDS,
    Node,
    NodeSchema,
    Undefined,
    UndefinedType,
    node_to_record,
    normalize_value,
    predicate,
    record_to_node,
)
from rulejson.codecs import JsonCodec, TextCodec, YamlCodec
from rulejson.exceptions import (
    CompilerError,
    DependencyError,
    MalformedRecordError,
    MissingFieldError,
    RuleJsonError,
    SchemaError,
    TextCodecError,
    UnknownNodeTypeError,
)
from rulejson.logging_utils import configure_logging, reset_logging
from rulejson.options import SerializationOptions
from rulejson.serialization import Serialization, compose, identity_compiler, unsplat

__version__ = "0.1.0"

__all__ = [
    "Node",
    "Undefined",
    "UndefinedType",
    "predicate",
    "NodeSchema",
    "NODE_FIELDS",
    "DEFAULT_SCHEMA",
    "normalize_value",
    "record_to_node",
    "node_to_record",
    "Serialization",
    "SerializationOptions",
    "compose",
    "identity_compiler",
    "unsplat",
    "TextCodec",
    "JsonCodec",
    "YamlCodec",
    "RuleJsonError",
    "SchemaError",
    "UnknownNodeTypeError",
    "MalformedRecordError",
    "MissingFieldError",
    "TextCodecError",
    "CompilerError",
    "DependencyError",
    "configure_logging",
    "reset_logging",
]
