#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/ast/schema.py
"""Node schema mapping each rule node type to its ordered field names."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from rulejson.exceptions import UnknownNodeTypeError

NODE_FIELDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "and": ("left", "right"),
        "attr": ("path", "rule"),
        "check": ("keys", "rule"),
        "each": ("rule",),
        "implication": ("left", "right"),
        "key": ("path", "rule"),
        "negation": ("rule",),
        "or": ("left", "right"),
        "set": ("rules",),
        "xor": ("rules",),
        "predicate": ("name", "args"),
    }
)


def canonical_name(value: Any) -> str:
    """Normalize a type tag or record key to its canonical lower-case form.

    String enums contribute their value, everything else its ``str()``.
    """
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower()


class NodeSchema:
    """Immutable lookup table from node type to ordered field names.

    Parameters
    ----------
    table : Mapping[str, Sequence[str]]
        Node type to field names. Copied and frozen on construction.

    Examples
    --------
    >>> DEFAULT_SCHEMA.fields("key")
    ('path', 'rule')
    >>> DEFAULT_SCHEMA.arity("negation")
    1

    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[str, Any]) -> None:
        self._table: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {canonical_name(node_type): tuple(fields) for node_type, fields in table.items()}
        )

    def fields(self, node_type: Any) -> tuple[str, ...]:
        """Return the ordered field names for a node type.

        Raises
        ------
        UnknownNodeTypeError
            If the type is not part of the schema

        """
        try:
            return self._table[canonical_name(node_type)]
        except KeyError:
            raise UnknownNodeTypeError(node_type) from None

    def arity(self, node_type: Any) -> int:
        """Return the number of fields declared for a node type."""
        return len(self.fields(node_type))

    @property
    def types(self) -> tuple[str, ...]:
        """All node types known to the schema."""
        return tuple(self._table)

    def __contains__(self, node_type: object) -> bool:
        return canonical_name(node_type) in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"NodeSchema({dict(self._table)!r})"


DEFAULT_SCHEMA = NodeSchema(NODE_FIELDS)

__all__ = ["NODE_FIELDS", "NodeSchema", "DEFAULT_SCHEMA", "canonical_name"]
