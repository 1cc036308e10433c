"""
Match Scoring

Ranks one document against one query using fixed title/content weights,
with an in-order subsequence match as the last-resort fallback.
"""

from dataclasses import dataclass
from enum import Enum

from sitesearch.search.index import Document


class MatchLocation(str, Enum):
    """Field that produced the first qualifying match."""

    TITLE = "title"
    CONTENT = "content"


@dataclass
class ScoringConfig:
    """Score weights per match kind."""

    title_exact: int = 100
    title_contains: int = 50
    title_fuzzy: int = 25
    content_contains: int = 10
    content_fuzzy: int = 5


@dataclass
class ScoredMatch:
    """A document with its relevance score for one query."""

    document: Document
    score: int
    match_location: MatchLocation | None


def fuzzy_match(pattern: str, text: str) -> bool:
    """
    Return True if every character of pattern appears in text, in order.

    Case-insensitive. Gaps between matched characters are not penalised.
    """
    pattern = pattern.lower()
    text = text.lower()
    pattern_idx = 0
    for char in text:
        if pattern_idx == len(pattern):
            break
        if char == pattern[pattern_idx]:
            pattern_idx += 1
    return pattern_idx == len(pattern)


class MatchScorer:
    """
    Additive title/content scorer.

    Title and content are checked independently and their scores add up.
    Within each field only the strongest kind of match counts
    (exact > substring > subsequence). The match location is the first
    field that matched, title taking priority over content.
    """

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or ScoringConfig()

    def score(self, document: Document, query: str) -> ScoredMatch:
        query_lower = query.lower()
        title_lower = document.title.lower()
        content_lower = document.content.lower()

        score = 0
        location: MatchLocation | None = None

        if title_lower == query_lower:
            score += self.config.title_exact
            location = MatchLocation.TITLE
        elif query_lower in title_lower:
            score += self.config.title_contains
            location = MatchLocation.TITLE
        elif fuzzy_match(query_lower, title_lower):
            score += self.config.title_fuzzy
            location = MatchLocation.TITLE

        if query_lower in content_lower:
            score += self.config.content_contains
            if location is None:
                location = MatchLocation.CONTENT
        elif fuzzy_match(query_lower, content_lower):
            score += self.config.content_fuzzy
            if location is None:
                location = MatchLocation.CONTENT

        return ScoredMatch(document=document, score=score, match_location=location)
