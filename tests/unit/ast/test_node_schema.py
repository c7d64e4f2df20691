"""Tests for the rule node schema."""

from enum import Enum

import pytest

from rulejson.ast.schema import DEFAULT_SCHEMA, NODE_FIELDS, NodeSchema, canonical_name
from rulejson.exceptions import UnknownNodeTypeError


class Kind(str, Enum):
    KEY = "key"


@pytest.mark.unit
class TestNodeSchema:
    """Test field lookups on the node schema."""

    def test_closed_set_of_types(self) -> None:
        """The default schema knows exactly the eleven rule node types."""
        assert set(DEFAULT_SCHEMA.types) == {
            "and",
            "or",
            "xor",
            "negation",
            "implication",
            "each",
            "set",
            "key",
            "attr",
            "check",
            "predicate",
        }

    @pytest.mark.parametrize(
        "node_type,fields",
        [
            ("and", ("left", "right")),
            ("or", ("left", "right")),
            ("implication", ("left", "right")),
            ("xor", ("rules",)),
            ("negation", ("rule",)),
            ("each", ("rule",)),
            ("set", ("rules",)),
            ("key", ("path", "rule")),
            ("attr", ("path", "rule")),
            ("check", ("keys", "rule")),
            ("predicate", ("name", "args")),
        ],
    )
    def test_field_order(self, node_type: str, fields: tuple) -> None:
        """Fields come back in declaration order."""
        assert DEFAULT_SCHEMA.fields(node_type) == fields
        assert DEFAULT_SCHEMA.arity(node_type) == len(fields)

    def test_unknown_type_raises(self) -> None:
        """An unknown tag raises UnknownNodeTypeError carrying the tag."""
        with pytest.raises(UnknownNodeTypeError) as exc_info:
            DEFAULT_SCHEMA.fields("bogus")

        assert exc_info.value.node_type == "bogus"
        assert "bogus" in str(exc_info.value)

    def test_lookup_is_case_insensitive(self) -> None:
        """Tags are canonicalized before lookup."""
        assert DEFAULT_SCHEMA.fields(" Key ") == ("path", "rule")
        assert DEFAULT_SCHEMA.fields(Kind.KEY) == ("path", "rule")
        assert "NEGATION" in DEFAULT_SCHEMA

    def test_table_is_read_only(self) -> None:
        """Neither the module table nor the schema can be mutated."""
        with pytest.raises(TypeError):
            NODE_FIELDS["bogus"] = ("x",)  # type: ignore[index]

        assert "bogus" not in DEFAULT_SCHEMA
        assert len(DEFAULT_SCHEMA) == len(NODE_FIELDS)

    def test_custom_schema_copies_its_table(self) -> None:
        """A schema built from a mutable dict is unaffected by later changes."""
        table = {"Unary": ["rule"]}
        schema = NodeSchema(table)
        table["other"] = ["x"]

        assert list(schema) == ["unary"]
        assert schema.fields("unary") == ("rule",)


@pytest.mark.unit
class TestCanonicalName:
    """Test tag and key canonicalization."""

    @pytest.mark.parametrize("value,expected", [("Type", "type"), (" rule ", "rule"), (Kind.KEY, "key"), (5, "5")])
    def test_canonical_name(self, value: object, expected: str) -> None:
        assert canonical_name(value) == expected
