#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rulejson serialization."""

from rulejson.options.base import CloneFrozenMixin
from rulejson.options.serialization import SerializationOptions

__all__ = ["CloneFrozenMixin", "SerializationOptions"]
