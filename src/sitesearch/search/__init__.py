"""Title/content search engine with snippet extraction and highlighting."""

from sitesearch.search.index import Document, SearchIndex
from sitesearch.search.searcher import (
    RenderedResult,
    SearchEngine,
    SearchResult,
    SearchState,
)
from sitesearch.search.scoring import MatchLocation, MatchScorer, ScoredMatch, ScoringConfig
from sitesearch.search.snippet import extract_snippet
from sitesearch.search.highlight import highlight

__all__ = [
    "Document",
    "SearchIndex",
    "SearchEngine",
    "SearchResult",
    "SearchState",
    "RenderedResult",
    "MatchLocation",
    "MatchScorer",
    "ScoredMatch",
    "ScoringConfig",
    "extract_snippet",
    "highlight",
]
