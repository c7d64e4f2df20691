#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the rulejson library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and codecs
2. Record Layout - Reserved keys and tokens of the record format
3. Serialization Defaults - Defaults for SerializationOptions
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

UndefinedEncoding = Literal["string", "empty_object"]

# =============================================================================
# Record Layout
# =============================================================================

# Key carrying the node type tag in every record
TYPE_KEY = "type"

# Field names with recursive handling in the record builder
RULE_FIELD = "rule"
RULES_FIELD = "rules"

# Predicate argument list, a sequence of (name, value) pairs
ARGS_FIELD = "args"

# Literal text form of the Undefined token
UNDEFINED_TOKEN = "Undefined"

# =============================================================================
# Serialization Defaults
# =============================================================================

DEFAULT_STRICT_MODE = False
DEFAULT_JSON_INDENT: int | None = None
DEFAULT_JSON_ENSURE_ASCII = False
DEFAULT_JSON_SORT_KEYS = False
DEFAULT_UNDEFINED_ENCODING: UndefinedEncoding = "string"
