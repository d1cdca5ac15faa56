"""Tests for the statement validator routing layer."""

import pytest

from inference_engine import InferenceEngine, inverse
from logic_validator import StatementValidator


@pytest.fixture
def taught(validator):
    for sentence in ("All dogs are mammals",
                     "All mammals are animals",
                     "No mammals are reptiles",
                     "All dogs are hairy animals"):
        validator.validate(sentence)
    return validator


def test_teach_registers_nouns(validator):
    result = validator.validate("All dogs are hairy animals")
    assert result["method"] == "teach"
    assert result["statement_type"] == "teach_all"
    assert result["subject"] == "dogs"
    assert result["predicate"] == "hairy_animals"
    assert result["answer"] is None
    assert validator.engine.has_noun("hairy_animals")
    assert validator.engine.get_relationship("dogs", "hairy_animals") == 1


def test_teach_no(validator):
    result = validator.validate("No dogs are cats")
    assert result["statement_type"] == "teach_no"
    assert validator.engine.get_relationship("dogs", "cats") == 0
    assert validator.engine.get_relationship("dogs", inverse("cats")) == 1


def test_direct_query(taught):
    result = taught.validate("Are all dogs mammals?")
    assert result["answer"] is True
    assert result["method"] == "direct"
    assert result["proof"] == "Proof: dogs → mammals"


def test_transitive_query(taught):
    result = taught.validate("Are all dogs animals?")
    assert result["answer"] is True
    assert result["method"] == "transitive"
    assert "dogs → mammals → animals" in result["proof"]


def test_multiword_query(taught):
    result = taught.validate("Are all dogs hairy animals?")
    assert result["predicate"] == "hairy_animals"
    assert result["answer"] is True


def test_transitive_exclusion(taught):
    result = taught.validate("Are all dogs reptiles?")
    assert result["answer"] is False
    assert result["method"] == "transitive"
    assert "not-reptiles" in result["proof"]


def test_are_no_query(taught):
    result = taught.validate("Are no mammals reptiles?")
    assert result["answer"] is True
    assert result["method"] == "direct"

    result = taught.validate("Are no dogs reptiles?")
    assert result["answer"] is True
    assert result["method"] == "transitive"


def test_are_no_query_rejected(taught):
    result = taught.validate("Are no dogs mammals?")
    assert result["answer"] is False
    assert result["proof"] == "Excluded: dogs ⊬ not-mammals"


def test_unknown_relationship(taught):
    result = taught.validate("Are all animals dogs?")
    assert result["answer"] is None
    assert result["method"] == "unknown"


def test_unknown_noun_does_not_register(taught):
    result = taught.validate("Are all dogs unicorns?")
    assert result["answer"] is None
    assert result["method"] == "unknown-noun"
    assert "unicorns" in result["proof"]
    assert not taught.engine.has_noun("unicorns")


def test_non_logical(validator):
    result = validator.validate("Who wrote Romeo and Juliet?")
    assert result["statement_type"] is None
    assert result["method"] == "non-logical"
    assert validator.engine.nouns() == []


def test_shared_engine():
    engine = InferenceEngine()
    engine.add_noun("dogs")
    validator = StatementValidator(engine)
    validator.validate("All dogs are mammals")
    assert engine.get_relationship("dogs", "mammals") == 1
    assert validator.graph_stats()["nouns"] == 2


def test_hyphenated_not_noun_is_taught_as_written(validator):
    result = validator.validate("All not-so-great movies are flops")
    assert result["subject"] == "not_so_great_movies"
    assert validator.engine.nouns() == ["flops", "not_so_great_movies"]
    assert validator.engine.get_relationship("not so great movies", "flops") == 1
