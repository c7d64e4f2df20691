#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/ast/serialization.py
"""Record serialization and deserialization for rule AST nodes.

This module converts rule AST nodes to and from flat records, the
JSON-shaped mapping form of a node:

    {"type": "key", "path": "age", "rule": {"type": "predicate", ...}}

Every record carries a ``type`` key plus exactly the fields the node schema
declares for that type, in declaration order. Two field names are handled
recursively when building records: ``rule`` holds one nested node and
``rules`` holds a list of nested nodes. All other field values are copied
as they are, except values that export their own AST (including
predicate argument values), which become nested records.

The conversion is exactly invertible:

    >>> from rulejson.ast.nodes import Node
    >>> node = Node("negation", Node("predicate", ("nil?", [])))
    >>> record = node_to_record(node)
    >>> record
    {'type': 'negation', 'rule': {'type': 'predicate', 'name': 'nil?', 'args': []}}
    >>> record_to_node(record) == node
    True

An empty mapping or the string ``"Undefined"`` found where a value is
expected loads as the :data:`~rulejson.ast.nodes.Undefined` token.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from rulejson.ast.nodes import Node, Undefined, UndefinedType, is_node_like
from rulejson.ast.schema import DEFAULT_SCHEMA, NodeSchema, canonical_name
from rulejson.constants import ARGS_FIELD, RULE_FIELD, RULES_FIELD, TYPE_KEY, UNDEFINED_TOKEN
from rulejson.exceptions import MalformedRecordError, MissingFieldError

logger = logging.getLogger(__name__)


def normalize_value(value: Any, schema: NodeSchema = DEFAULT_SCHEMA, strict_mode: bool = False) -> Any:
    """Recursively turn a decoded JSON value into AST values.

    Parameters
    ----------
    value : any
        Value produced by a JSON (or compatible) decoder
    schema : NodeSchema, default DEFAULT_SCHEMA
        Schema used to resolve nested records
    strict_mode : bool, default False
        Passed through to :func:`record_to_node` for nested records

    Returns
    -------
    any
        ``Undefined`` for an empty mapping or the ``"Undefined"`` string,
        a :class:`Node` for a non-empty mapping, a new sequence for a
        sequence, and the value itself otherwise

    """
    if isinstance(value, (Node, UndefinedType)):
        return value
    if isinstance(value, Mapping):
        if not value:
            return Undefined
        return record_to_node(value, schema=schema, strict_mode=strict_mode)
    if isinstance(value, list):
        return [normalize_value(item, schema, strict_mode) for item in value]
    if isinstance(value, tuple):
        return tuple(normalize_value(item, schema, strict_mode) for item in value)
    if isinstance(value, str) and value == UNDEFINED_TOKEN:
        return Undefined
    return value


def _load_args(node_type: str, value: Any, schema: NodeSchema, strict_mode: bool) -> list[tuple[Any, Any]]:
    """Load a predicate argument list of ``[name, value]`` pairs."""
    if not isinstance(value, (list, tuple)):
        raise MalformedRecordError(
            f"Field '{ARGS_FIELD}' of '{node_type}' must be a sequence of [name, value] pairs, "
            f"got {type(value).__name__}",
            node_type=node_type,
            field_name=ARGS_FIELD,
        )

    pairs = []
    for index, entry in enumerate(value):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise MalformedRecordError(
                f"Argument {index} of '{node_type}' must be a [name, value] pair, got {entry!r}",
                node_type=node_type,
                field_name=ARGS_FIELD,
            )
        name, arg = entry
        pairs.append((name, normalize_value(arg, schema, strict_mode)))
    return pairs


def _load_field(node_type: str, field_name: str, raw: Any, schema: NodeSchema, strict_mode: bool) -> Any:
    if field_name == ARGS_FIELD:
        return _load_args(node_type, raw, schema, strict_mode)

    value = normalize_value(raw, schema, strict_mode)
    if field_name == RULE_FIELD and not isinstance(value, Node):
        raise MalformedRecordError(
            f"Field '{RULE_FIELD}' of '{node_type}' must be a record, got {raw!r}",
            node_type=node_type,
            field_name=field_name,
        )
    if field_name == RULES_FIELD and not (
        isinstance(value, (list, tuple)) and all(isinstance(item, Node) for item in value)
    ):
        raise MalformedRecordError(
            f"Field '{RULES_FIELD}' of '{node_type}' must be a list of records, got {raw!r}",
            node_type=node_type,
            field_name=field_name,
        )
    return value


def record_to_node(record: Mapping[str, Any], schema: NodeSchema = DEFAULT_SCHEMA, strict_mode: bool = False) -> Node:
    """Rebuild an AST node from its record form.

    Parameters
    ----------
    record : Mapping
        Mapping with a ``type`` key and the fields declared for that type.
        Keys are normalized to lower-case strings before lookup.
    schema : NodeSchema, default DEFAULT_SCHEMA
        Schema declaring the fields of each node type
    strict_mode : bool, default False
        If True, raise on keys the node type does not declare.
        If False, log a warning and ignore them.

    Returns
    -------
    Node
        The node; its payload is the bare value for single-field types and
        a tuple in schema order otherwise

    Raises
    ------
    UnknownNodeTypeError
        If the type tag is not part of the schema
    MissingFieldError
        If the record lacks ``type`` or a declared field
    MalformedRecordError
        If the record is not a mapping, two keys share a normalized name,
        ``rule`` is not a record, ``rules`` is not a list of records,
        ``args`` is not a sequence of pairs, or (in strict mode) the record
        has undeclared keys

    Examples
    --------
    >>> record_to_node({"type": "predicate", "name": "gt?", "args": [["num", 5]]})
    Node(type='predicate', payload=('gt?', [('num', 5)]))

    """
    if not isinstance(record, Mapping):
        raise MalformedRecordError(f"Record must be a mapping, got {type(record).__name__}")

    data: dict[str, Any] = {}
    for key, value in record.items():
        name = canonical_name(key)
        if name in data:
            raise MalformedRecordError(f"Record has more than one key spelled '{name}'", field_name=name)
        data[name] = value
    if TYPE_KEY not in data:
        raise MissingFieldError(None, TYPE_KEY)

    raw_type = data.pop(TYPE_KEY)
    fields = schema.fields(raw_type)
    node_type = canonical_name(raw_type)

    extra = [key for key in data if key not in fields]
    if extra:
        if strict_mode:
            raise MalformedRecordError(
                f"Record of type '{node_type}' has undeclared fields: {', '.join(extra)}",
                node_type=node_type,
                field_name=extra[0],
            )
        logger.warning("Ignoring undeclared fields %s in record of type '%s'", extra, node_type)

    values = []
    for field_name in fields:
        if field_name not in data:
            raise MissingFieldError(node_type, field_name)
        values.append(_load_field(node_type, field_name, data[field_name], schema, strict_mode))

    payload = values[0] if len(values) == 1 else tuple(values)
    return Node(node_type, payload)


def _export(node: Any) -> tuple[Any, Any]:
    """Obtain the raw ``(type, payload)`` pair of an exportable value."""
    ast = node.to_ast() if hasattr(node, "to_ast") else node
    if isinstance(ast, (str, bytes)) or not isinstance(ast, (list, tuple)) or len(ast) != 2:
        raise MalformedRecordError(f"Expected a (type, payload) AST pair, got {ast!r}")
    return ast[0], ast[1]


def _is_wrapped(field_name: str, payload: Any) -> bool:
    """Check whether a single-field payload arrived as a one-element sequence."""
    if isinstance(payload, Node) or not isinstance(payload, (list, tuple)) or len(payload) != 1:
        return False
    if field_name == RULES_FIELD:
        # [[r1, r2]] is wrapped, [r1] is a bare one-rule list
        inner = payload[0]
        return isinstance(inner, (list, tuple)) and not is_node_like(inner)
    return True


def _splat(node_type: str, fields: tuple[str, ...], payload: Any) -> tuple[Any, ...]:
    """Align a node payload with the schema fields of its type."""
    if len(fields) == 1:
        return tuple(payload) if _is_wrapped(fields[0], payload) else (payload,)

    if isinstance(payload, (str, bytes)) or not isinstance(payload, (list, tuple)) or len(payload) != len(fields):
        raise MalformedRecordError(
            f"Node of type '{node_type}' expects {len(fields)} payload values ({', '.join(fields)}), got {payload!r}",
            node_type=node_type,
        )
    return tuple(payload)


def _dump_arg(entry: Any, schema: NodeSchema) -> Any:
    if not isinstance(entry, (list, tuple)) or len(entry) != 2 or not hasattr(entry[1], "to_ast"):
        return entry
    name, value = entry
    return (name, node_to_record(value, schema))


def _dump_field(node_type: str, field_name: str, value: Any, schema: NodeSchema) -> Any:
    if field_name == RULE_FIELD:
        return node_to_record(value, schema)
    if field_name == RULES_FIELD:
        if not isinstance(value, (list, tuple)):
            raise MalformedRecordError(
                f"Field '{RULES_FIELD}' of '{node_type}' must be a sequence of nodes, got {type(value).__name__}",
                node_type=node_type,
                field_name=field_name,
            )
        return [node_to_record(item, schema) for item in value]
    if field_name == ARGS_FIELD and isinstance(value, (list, tuple)):
        return [_dump_arg(entry, schema) for entry in value]
    if hasattr(value, "to_ast"):
        return node_to_record(value, schema)
    return value


def node_to_record(node: Any, schema: NodeSchema = DEFAULT_SCHEMA) -> dict[str, Any]:
    """Build the record form of an AST node.

    Parameters
    ----------
    node : any
        Object exposing ``to_ast() -> (type, payload)``, or a raw
        ``(type, payload)`` pair. Single-field payloads are accepted bare
        or wrapped in a one-element sequence.
    schema : NodeSchema, default DEFAULT_SCHEMA
        Schema declaring the fields of each node type

    Returns
    -------
    dict
        ``{"type": ..., <field>: <value>, ...}`` in schema field order

    Raises
    ------
    UnknownNodeTypeError
        If the exported type is not part of the schema
    MalformedRecordError
        If the export is not a pair or the payload does not match the arity

    """
    node_type, payload = _export(node)
    fields = schema.fields(node_type)
    node_type = canonical_name(node_type)

    record: dict[str, Any] = {TYPE_KEY: node_type}
    for field_name, value in zip(fields, _splat(node_type, fields, payload)):
        record[field_name] = _dump_field(node_type, field_name, value, schema)
    return record


__all__ = [
    "normalize_value",
    "record_to_node",
    "node_to_record",
]
