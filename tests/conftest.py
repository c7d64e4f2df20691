"""Pytest configuration and shared fixtures for the rulejson test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from rulejson import Node, Serialization, predicate

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def serialization() -> Serialization:
    """Provide a serialization pipeline with default collaborators."""
    return Serialization()


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide the directory holding rule fixture files."""
    return FIXTURES_DIR


@pytest.fixture
def age_rule() -> Node:
    """Provide a key rule checking that ``age`` is greater than 18.

    Returns
    -------
    Node
        ``key(age, predicate(gt?, num=18))``

    """
    return Node("key", ("age", predicate("gt?", ("num", 18))))


@pytest.fixture
def age_record() -> dict:
    """Provide the record form of :func:`age_rule`."""
    return {
        "type": "key",
        "path": "age",
        "rule": {"type": "predicate", "name": "gt?", "args": [["num", 18]]},
    }
