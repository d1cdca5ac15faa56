"""Shared fixtures for the noun inference test suite."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from inference_engine import InferenceEngine, inverse, replace_spaces
from knowledge_graph import WeightedGraph
from logic_validator import StatementValidator

RAW_NOUNS = ["dogs", "mammals", "hairy animals", "cats"]


@pytest.fixture
def nouns():
    """Normalized nouns: dogs, mammals, hairy_animals, cats."""
    return [replace_spaces(n) for n in RAW_NOUNS]


@pytest.fixture
def inverses(nouns):
    return [inverse(n) for n in nouns]


@pytest.fixture
def graph():
    return WeightedGraph()


@pytest.fixture
def engine():
    return InferenceEngine()


@pytest.fixture
def validator():
    return StatementValidator()
