#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/ast/__init__.py
"""Abstract Syntax Tree (AST) module for rule expressions.

The module consists of several components:

- nodes: the ``Node`` pair and the ``Undefined`` token
- schema: the node-type table declaring each type's ordered fields
- serialization: conversion between nodes and flat records

Examples
--------
    >>> from rulejson.ast import Node, node_to_record, record_to_node
    >>> node = Node("key", ("age", Node("predicate", ("gt?", [("num", 18)]))))
    >>> record_to_node(node_to_record(node)) == node
    True

"""

from rulejson.ast.nodes import Node, Undefined, UndefinedType, is_node_like, predicate
from rulejson.ast.schema import DEFAULT_SCHEMA, NODE_FIELDS, NodeSchema, canonical_name
from rulejson.ast.serialization import node_to_record, normalize_value, record_to_node

__all__ = [
    "Node",
    "Undefined",
    "UndefinedType",
    "is_node_like",
    "predicate",
    "NodeSchema",
    "NODE_FIELDS",
    "DEFAULT_SCHEMA",
    "canonical_name",
    "normalize_value",
    "record_to_node",
    "node_to_record",
]
