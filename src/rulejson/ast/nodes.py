#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/ast/nodes.py
"""AST node and Undefined token for rule expressions.

A rule AST node is a tagged pair ``(type, payload)``. The payload is the
bare field value for node types declaring a single field, and a tuple of
field values in schema order otherwise:

    >>> from rulejson.ast.nodes import Node
    >>> gt = Node("predicate", ("gt?", [("num", 5)]))
    >>> Node("negation", gt)
    Node(type='negation', payload=Node(type='predicate', payload=('gt?', [('num', 5)])))

Because :class:`Node` is a named tuple it compares equal to a plain
``(type, payload)`` tuple.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from rulejson.constants import UNDEFINED_TOKEN


class UndefinedType:
    """Type of the :data:`Undefined` singleton, the "no value" token.

    Only one instance ever exists; copying and unpickling return it.
    """

    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return UNDEFINED_TOKEN

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Undefined"

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> UndefinedType:
        return self


Undefined = UndefinedType()


class Node(NamedTuple):
    """A rule AST node.

    Parameters
    ----------
    type : str
        Node type tag, one of the schema's node types
    payload : any
        Bare value for single-field types, tuple of field values otherwise

    """

    type: str
    payload: Any

    def to_ast(self) -> Node:
        """Return the node itself; raw nodes carry the export capability."""
        return self


def is_node_like(value: Any) -> bool:
    """Check whether a value can stand for a nested AST node.

    A value is node-like if it exports an AST through ``to_ast`` or is a
    raw two-element ``(type, payload)`` sequence with a string tag.
    """
    if isinstance(value, Node) or hasattr(value, "to_ast"):
        return True
    return isinstance(value, (list, tuple)) and len(value) == 2 and isinstance(value[0], str)


def predicate(name: str, *args: tuple[str, Any]) -> Node:
    """Build a predicate node from a name and ``(name, value)`` argument pairs."""
    return Node("predicate", (name, [tuple(arg) for arg in args]))


__all__ = ["Node", "Undefined", "UndefinedType", "is_node_like", "predicate"]
