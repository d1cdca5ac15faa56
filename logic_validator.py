# logic_validator.py

"""
logic_validator.py — statement router
=====================================
Pipeline:
  Sentence → logic_templates.parse_statement → Parsed dict
                                                   ↓
                                        InferenceEngine (teach / query)
                                                   ↓
                                   Result dict with answer + proof chain

Teaching registers both nouns before writing any edge. Queries never
register anything; a query about an unknown noun is answered with
answer=None and method='unknown-noun'.
"""

import logging
from typing import Dict, List, Optional

from inference_engine import InferenceEngine, UnknownNounError, inverse
from logic_templates import parse_statement

logger = logging.getLogger(__name__)


class StatementValidator:
    """
    Routes categorical sentences to an InferenceEngine.
    """

    def __init__(self, engine: Optional[InferenceEngine] = None):
        self.engine = engine if engine is not None else InferenceEngine()

    # ─────────────────────────────────────────────────────────────────────────
    # PUBLIC API
    # ─────────────────────────────────────────────────────────────────────────

    def validate(self, text: str) -> Dict:
        """
        Parse a sentence and teach or query the engine.

        Returns dict with keys:
          statement_type : 'teach_all'|'teach_no'|'query_all'|'query_no'|None
          subject        : normalized subject noun or None
          predicate      : normalized predicate noun or None
          answer         : True|False|None  (None = unknown / not a question)
          proof          : human-readable proof string
          method         : 'teach'|'direct'|'transitive'|'unknown'|
                           'unknown-noun'|'non-logical'
        """
        parsed = parse_statement(text, is_known=self.engine.has_noun)
        s_type = parsed["type"]

        if s_type in ("teach_all", "teach_no"):
            return self._teach(parsed)

        elif s_type == "query_all":
            return self._query(parsed, negated=False)

        elif s_type == "query_no":
            return self._query(parsed, negated=True)

        logger.debug(f"[StatementValidator] Non-logical input: {text!r}")
        return {
            'statement_type': None,
            'subject':        None,
            'predicate':      None,
            'answer':         None,
            'proof':          'No categorical statement detected',
            'method':         'non-logical',
        }

    def graph_stats(self) -> dict:
        return self.engine.stats()

    # ─────────────────────────────────────────────────────────────────────────
    # ROUTES
    # ─────────────────────────────────────────────────────────────────────────

    def _teach(self, parsed: Dict) -> Dict:
        engine = self.engine
        engine.add_noun(parsed["subject"])
        engine.add_noun(parsed["predicate"])
        subject = engine.resolve(parsed["subject"])
        predicate = engine.resolve(parsed["predicate"])

        if parsed["type"] == "teach_all":
            engine.teach_all_are(subject, predicate)
            proof = f'Learned: all {subject} are {predicate}'
        else:
            engine.teach_no_are(subject, predicate)
            proof = f'Learned: no {subject} are {predicate}'

        return {
            'statement_type': parsed["type"],
            'subject':        subject,
            'predicate':      predicate,
            'answer':         None,
            'proof':          proof,
            'method':         'teach',
        }

    def _query(self, parsed: Dict, negated: bool) -> Dict:
        """
        'Are all A B?'  reads A → B.
        'Are no A B?'   reads A → not-B.
        """
        engine = self.engine
        subject = engine.resolve(parsed["subject"])
        predicate = engine.resolve(parsed["predicate"])
        target = inverse(predicate) if negated else predicate

        base = {
            'statement_type': parsed["type"],
            'subject':        subject,
            'predicate':      predicate,
        }

        try:
            value, path = engine.explain(subject, target)
        except UnknownNounError as e:
            logger.info(f"[StatementValidator] {e}")
            return {**base,
                    'answer': None,
                    'proof':  f'Unknown noun: {e.noun}',
                    'method': 'unknown-noun'}

        if value is None:
            return {**base,
                    'answer': None,
                    'proof':  f'No relationship known between {subject} and {target}',
                    'method': 'unknown'}

        direct = engine.has_direct_relationship(subject, target)
        return {**base,
                'answer': value == 1,
                'proof':  self._format_proof(path, value, direct),
                'method': 'direct' if direct else 'transitive'}

    @staticmethod
    def _format_proof(path: List[str], value: int, direct: bool) -> str:
        chain = " → ".join(path)
        if value == 1:
            return f'Proof: {chain}'
        if direct:
            return f'Excluded: {path[0]} ⊬ {path[1]}'
        return f'Proof: {chain} (so {path[0]} ⊬ {inverse(path[-1])})'
