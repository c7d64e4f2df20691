"""Test utilities for the rulejson test suite.

This module provides Hypothesis strategies that generate well-formed rule
ASTs, plus a small rule object type that exports its AST the way compiled
rules do.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from rulejson import Node, Undefined


def rule_nodes(text: st.SearchStrategy[str], numbers: st.SearchStrategy[Any]) -> st.SearchStrategy[Node]:
    """Build a strategy for well-formed rule ASTs.

    Parameters
    ----------
    text : SearchStrategy[str]
        Strings used for names, paths and string arguments
    numbers : SearchStrategy
        Numeric argument values

    """
    # Strings that load as something other than themselves are excluded
    safe_text = text.filter(lambda s: s != "Undefined")
    scalars = st.one_of(st.none(), st.booleans(), numbers, safe_text)
    plain_values = st.one_of(scalars, st.just(Undefined), st.lists(scalars, max_size=3))
    paths = st.one_of(safe_text, st.lists(safe_text, min_size=1, max_size=3))

    def predicate_nodes(values: st.SearchStrategy[Any]) -> st.SearchStrategy[Node]:
        return st.builds(
            lambda name, args: Node("predicate", (name, args)),
            safe_text,
            st.lists(st.tuples(safe_text, values), max_size=3),
        )

    # Argument values may themselves be predicates, as in includes?(rule)
    predicates = predicate_nodes(st.one_of(plain_values, predicate_nodes(plain_values)))

    def compound(children: st.SearchStrategy[Node]) -> st.SearchStrategy[Node]:
        return st.one_of(
            st.builds(
                lambda t, left, right: Node(t, (left, right)),
                st.sampled_from(["and", "or", "implication"]),
                children,
                children,
            ),
            st.builds(lambda t, rule: Node(t, rule), st.sampled_from(["negation", "each"]), children),
            st.builds(lambda t, rules: Node(t, rules), st.sampled_from(["set", "xor"]), st.lists(children, max_size=3)),
            st.builds(lambda t, path, rule: Node(t, (path, rule)), st.sampled_from(["key", "attr"]), paths, children),
            st.builds(lambda keys, rule: Node("check", (keys, rule)), st.lists(safe_text, max_size=3), children),
        )

    return st.recursive(predicates, compound, max_leaves=8)


nodes = rule_nodes(
    st.text(max_size=12),
    st.integers(min_value=-(2**53), max_value=2**53) | st.floats(allow_nan=False, allow_infinity=False),
)

# Printable ASCII and integers only, for codecs with lossy scalar handling
ascii_nodes = rule_nodes(
    st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=12),
    st.integers(min_value=-(2**31), max_value=2**31),
)


class ExportingRule:
    """Minimal rule object exposing ``to_ast`` like a compiled rule."""

    def __init__(self, ast: Any) -> None:
        self.ast = ast

    def to_ast(self) -> Any:
        return self.ast

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExportingRule) and other.ast == self.ast

    def __repr__(self) -> str:
        return f"ExportingRule({self.ast!r})"


def compile_rules(ast: Any) -> Any:
    """Wrap every top-level node of a loaded value in an :class:`ExportingRule`."""
    if isinstance(ast, list):
        return [ExportingRule(node) for node in ast]
    return ExportingRule(ast)
