# logic_templates.py

"""
Categorical statement templates
===============================
The four sentence shapes the console understands:

  1. Universal affirmative  : "All dogs are mammals."     → teach_all
  2. Universal negative     : "No dogs are cats."         → teach_no
  3. Universal question     : "Are all dogs animals?"     → query_all
  4. Exclusion question     : "Are no dogs cats?"         → query_no

Anything else is reported as non-logical. Keywords are matched without
regard to case; noun text keeps its case.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

NON_LOGICAL = {"type": "non-logical"}

_TRAILING = re.compile(r"[\s.!?]+$")


def _clean(text: str) -> str:
    return _TRAILING.sub("", text.strip())


def split_pair(words: List[str],
               is_known: Optional[Callable[[str], bool]] = None
               ) -> Tuple[Optional[str], Optional[str]]:
    """
    Split "hairy animals mammals" into two nouns.

    Questions have no keyword between subject and predicate, so every split
    point is tried and the first one where both halves are known nouns wins.
    Without a match the first word is the subject.
    """
    if len(words) < 2:
        return None, None

    if is_known is not None:
        for i in range(1, len(words)):
            subject, predicate = " ".join(words[:i]), " ".join(words[i:])
            if is_known(subject) and is_known(predicate):
                return subject, predicate

    return words[0], " ".join(words[1:])


class StatementTemplate:
    """A sentence shape bound to one statement type."""

    def __init__(self, statement_type: str, pattern: str):
        self.statement_type = statement_type
        self.pattern = re.compile(pattern, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        return self.pattern.match(_clean(text)) is not None

    def extract(self, text: str,
                is_known: Optional[Callable[[str], bool]] = None
                ) -> Tuple[Optional[str], Optional[str]]:
        m = self.pattern.match(_clean(text))
        if not m:
            return None, None
        return m.group("subject").strip(), m.group("predicate").strip()


class QuestionTemplate(StatementTemplate):
    """Question shapes with no separator between the two nouns."""

    def extract(self, text: str,
                is_known: Optional[Callable[[str], bool]] = None
                ) -> Tuple[Optional[str], Optional[str]]:
        m = self.pattern.match(_clean(text))
        if not m:
            return None, None
        return split_pair(m.group("nouns").split(), is_known)


TEMPLATES = [
    QuestionTemplate("query_all", r"^are\s+all\s+(?P<nouns>.+)$"),
    QuestionTemplate("query_no",  r"^are\s+no\s+(?P<nouns>.+)$"),
    StatementTemplate("teach_all", r"^all\s+(?P<subject>.+?)\s+are\s+(?P<predicate>.+)$"),
    StatementTemplate("teach_no",  r"^no\s+(?P<subject>.+?)\s+are\s+(?P<predicate>.+)$"),
]


def parse_statement(text: str,
                    is_known: Optional[Callable[[str], bool]] = None) -> Dict:
    """
    Returns one of:
      {"type": "teach_all", "subject": A, "predicate": B}
      {"type": "teach_no",  "subject": A, "predicate": B}
      {"type": "query_all", "subject": A, "predicate": B}
      {"type": "query_no",  "subject": A, "predicate": B}
      {"type": "non-logical"}
    """
    for template in TEMPLATES:
        if not template.matches(text):
            continue
        subject, predicate = template.extract(text, is_known)
        if subject and predicate:
            return {"type":      template.statement_type,
                    "subject":   subject,
                    "predicate": predicate}
        return dict(NON_LOGICAL)
    return dict(NON_LOGICAL)
