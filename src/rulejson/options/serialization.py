#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/options/serialization.py
"""Options for rule serialization pipelines.

This module provides configuration for loading records (strictness) and
for the default JSON codec (layout and the text form of ``Undefined``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from rulejson.constants import (
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_SORT_KEYS,
    DEFAULT_STRICT_MODE,
    DEFAULT_UNDEFINED_ENCODING,
    UndefinedEncoding,
)
from rulejson.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class SerializationOptions(CloneFrozenMixin):
    """Options for serializing and loading rule ASTs.

    Parameters
    ----------
    strict_mode : bool, default = False
        Whether to fail on record keys the node type does not declare.
        When False they are logged and ignored.
    indent : int or None, default = None
        Number of spaces for JSON indentation. None for compact output.
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters in JSON output
    sort_keys : bool, default = False
        Whether to sort JSON object keys alphabetically instead of keeping
        the schema field order
    undefined_encoding : {"string", "empty_object"}, default = "string"
        Text form of ``Undefined`` in output: the string ``"Undefined"`` or
        an empty object ``{}``. Both forms are accepted on input.

    Examples
    --------
    Pretty-printed output:
        >>> options = SerializationOptions(indent=2)

    Reject unknown record keys:
        >>> options = SerializationOptions(strict_mode=True)

    """

    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={"help": "Fail on record keys not declared for the node type", "importance": "core"},
    )
    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact)", "type": int, "importance": "core"},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters in JSON", "importance": "advanced"},
    )
    sort_keys: bool = field(
        default=DEFAULT_JSON_SORT_KEYS,
        metadata={"help": "Sort JSON object keys alphabetically", "importance": "advanced"},
    )
    undefined_encoding: UndefinedEncoding = field(
        default=DEFAULT_UNDEFINED_ENCODING,
        metadata={
            "help": "Text form of Undefined: 'string' emits \"Undefined\", 'empty_object' emits {}",
            "choices": ["string", "empty_object"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative or None, got {self.indent}")
        if self.undefined_encoding not in get_args(UndefinedEncoding):
            raise ValueError(
                f"undefined_encoding must be one of {get_args(UndefinedEncoding)}, got {self.undefined_encoding!r}"
            )
