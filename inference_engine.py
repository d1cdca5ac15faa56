# inference_engine.py

"""
Noun Inference Engine
=====================
Keeps "all A are B" / "no A are B" knowledge in a signed, weighted graph and
answers whether one noun implies, excludes, or says nothing about another.

Every noun N lives in the graph together with its negation not-N:

  N     → N      weight 1    (reflexive)
  not-N → not-N  weight 1
  N     → not-N  weight 0    (contradiction)
  not-N → N      weight 0

Teaching "all A are B" writes A → B (1), its contrapositive not-B → not-A (1)
and the two cross exclusions A → not-B (0), not-A → B (0). Teaching
"no A are B" writes the same four pairs with the weights flipped.

Queries read the direct edge when one exists, otherwise they fall back to a
breadth-first search over weight-1 edges:
  - a chain X → ... → Y         means X implies Y     (1)
  - a chain X → ... → not-Y     means X excludes Y    (0)
  - neither                     means unknown         (None)
"""

import logging
import re
from typing import List, Optional, Tuple

from knowledge_graph import VertexNotFoundError, WeightedGraph

logger = logging.getLogger(__name__)

# Normalized nouns never contain a dash, so this marker cannot collide.
NEGATION_PREFIX = "not-"

_SEPARATORS = re.compile(r"[\s\-]+")


class UnknownNounError(VertexNotFoundError):
    """Raised when an operation references a noun that was never added."""

    def __init__(self, noun: str):
        super().__init__(noun, f"Unknown noun: {noun!r} (add it with add_noun first)")
        self.noun = noun


# ─────────────────────────────────────────────────────────────────────────────
# IDENTIFIERS
# ─────────────────────────────────────────────────────────────────────────────

def negate(value: bool) -> bool:
    return not value


def replace_spaces(raw: str) -> str:
    """Collapse every run of whitespace and dashes into one underscore."""
    return _SEPARATORS.sub("_", raw)


def is_negation(identifier: str) -> bool:
    return identifier.startswith(NEGATION_PREFIX)


def inverse(identifier: str) -> str:
    """not-N for a noun N, and N again for not-N."""
    if is_negation(identifier):
        return identifier[len(NEGATION_PREFIX):]
    return NEGATION_PREFIX + identifier


# ─────────────────────────────────────────────────────────────────────────────
# ENGINE
# ─────────────────────────────────────────────────────────────────────────────

class InferenceEngine:
    """
    Owns one WeightedGraph. All edge writes go through assert_statement.
    Not thread-safe; callers sharing an engine must serialize every call.
    """

    negate = staticmethod(negate)
    replace_spaces = staticmethod(replace_spaces)
    inverse = staticmethod(inverse)
    is_negation = staticmethod(is_negation)

    def __init__(self, graph: Optional[WeightedGraph] = None):
        self._graph = graph if graph is not None else WeightedGraph()

    @property
    def graph(self) -> WeightedGraph:
        return self._graph

    def resolve(self, identifier: str) -> str:
        """
        Canonical vertex key for a raw noun or a negation identifier.

        Only "not-" followed by an already normalized noun is a negation;
        raw text such as "not-so-great movies" is normalized as a whole.
        """
        if is_negation(identifier):
            rest = identifier[len(NEGATION_PREFIX):]
            if rest and rest == replace_spaces(rest):
                return identifier
        return replace_spaces(identifier)

    def _require(self, *identifiers: str) -> None:
        for identifier in identifiers:
            if not self._graph.has_vertex(identifier):
                raise UnknownNounError(identifier)

    @staticmethod
    def _check_weight(weight) -> int:
        if isinstance(weight, bool):
            return int(weight)
        if isinstance(weight, (int, float)) and weight in (0, 1):
            return int(weight)
        logger.warning(f"[InferenceEngine] Rejected relationship weight {weight!r}")
        raise ValueError(f"Relationship weight must be 0 or 1, got {weight!r}")

    # ─────────────────────────────────────────────────────────────
    # NOUNS
    # ─────────────────────────────────────────────────────────────

    def add_noun(self, raw: str) -> None:
        """
        Register a noun and its negation. Adding a negation identifier
        registers its base noun. Re-adding an existing noun is a no-op.
        """
        key = self.resolve(raw)
        noun = inverse(key) if is_negation(key) else key
        if not noun:
            logger.warning(f"[InferenceEngine] Rejected empty noun {raw!r}")
            raise ValueError(f"Cannot register an empty noun (got {raw!r})")

        if self._graph.has_vertex(noun):
            logger.debug(f"[InferenceEngine] Noun {noun!r} already registered")
            return

        not_noun = inverse(noun)
        self._graph.add_vertex(noun)
        self._graph.add_vertex(not_noun)

        self.assert_statement(noun, noun, 1)
        self.assert_statement(not_noun, not_noun, 1)
        self.assert_statement(noun, not_noun, 0)
        self.assert_statement(not_noun, noun, 0)
        logger.debug(f"[InferenceEngine] Registered noun {noun!r}")

    def has_noun(self, identifier: str) -> bool:
        return self._graph.has_vertex(self.resolve(identifier))

    def nouns(self) -> List[str]:
        """Registered nouns, without their negations."""
        return sorted(v for v in self._graph.vertices() if not is_negation(v))

    # ─────────────────────────────────────────────────────────────
    # ASSERTIONS
    # ─────────────────────────────────────────────────────────────

    def assert_statement(self, x: str, y: str, weight) -> bool:
        """Set the edge x → y. Both identifiers must already be registered."""
        x, y = self.resolve(x), self.resolve(y)
        self._require(x, y)
        weight = self._check_weight(weight)
        self._graph.set_edge(x, y, weight)
        logger.debug(f"[InferenceEngine] {x} → {y} = {weight}")
        return True

    def teach_all_are(self, a: str, b: str) -> None:
        """All A are B."""
        self._teach(a, b, True)

    def teach_no_are(self, a: str, b: str) -> None:
        """No A are B."""
        self._teach(a, b, False)

    def _teach(self, a: str, b: str, holds: bool) -> None:
        a, b = self.resolve(a), self.resolve(b)
        self._require(a, b)

        truth, flipped = int(holds), int(negate(holds))
        not_a, not_b = inverse(a), inverse(b)

        self.assert_statement(a, b, truth)
        self.assert_statement(not_b, not_a, truth)
        self.assert_statement(a, not_b, flipped)
        self.assert_statement(not_a, b, flipped)
        logger.info(f"[InferenceEngine] Learned: {'all' if holds else 'no'} "
                    f"{a} are {b}")

    # ─────────────────────────────────────────────────────────────
    # QUERIES
    # ─────────────────────────────────────────────────────────────

    def has_direct_relationship(self, x: str, y: str) -> bool:
        """True iff an edge x → y was asserted, whatever its weight."""
        return self._graph.has_edge(self.resolve(x), self.resolve(y))

    def get_relationship(self, x: str, y: str) -> Optional[int]:
        """1 if x implies y, 0 if x excludes y, None if unknown."""
        value, _ = self.explain(x, y)
        return value

    def explain(self, x: str, y: str) -> Tuple[Optional[int], List[str]]:
        """
        Resolve x → y and return (value, proof_path).

        proof_path is [x, y] for a direct edge, the BFS chain of weight-1
        edges for a transitive answer (ending in not-y when the answer is 0),
        and [] when the relationship is unknown.
        """
        x, y = self.resolve(x), self.resolve(y)
        self._require(x, y)

        if self._graph.has_edge(x, y):
            return self._graph.get_weight(x, y), [x, y]

        view = self._graph.implication_view()

        path = self._graph.shortest_path(x, y, view)
        if path:
            logger.debug(f"[InferenceEngine] Transitive: {' → '.join(path)}")
            return 1, path

        path = self._graph.shortest_path(x, inverse(y), view)
        if path:
            logger.debug(f"[InferenceEngine] Transitive exclusion: {' → '.join(path)}")
            return 0, path

        logger.debug(f"[InferenceEngine] Unknown relationship: {x} → {y}")
        return None, []

    def stats(self) -> dict:
        return {"nouns": len(self.nouns()), **self._graph.stats()}
