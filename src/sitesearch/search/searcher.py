"""
Search Engine

Scores every document in the index against the query, drops non-matches,
ranks the rest and renders title/excerpt HTML plus a navigation link that
carries the query so the destination page can highlight it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable
from urllib.parse import quote

from sitesearch.core.config import settings
from sitesearch.i18n.messages import announce_count, get_messages
from sitesearch.search.highlight import highlight
from sitesearch.search.index import Document, SearchIndex
from sitesearch.search.scoring import (
    MatchLocation,
    MatchScorer,
    ScoredMatch,
    ScoringConfig,
)
from sitesearch.search.snippet import extract_snippet, title_excerpt
from sitesearch.search.timers import Debouncer

logger = logging.getLogger(__name__)

# Fragment parameter read back by the page annotator
FRAGMENT_PARAM = "search"
# Characters encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


class SearchState(str, Enum):
    CLEARED = "cleared"
    HINT = "hint"
    RESULTS = "results"


@dataclass
class RenderedResult:
    """A single rendered search result."""

    title_html: str
    excerpt_html: str | None
    href: str
    score: int


@dataclass
class SearchResult:
    """Search results with display and accessibility text."""

    query: str
    state: SearchState
    hits: list[RenderedResult] = field(default_factory=list)
    message: str | None = None
    announcement: str | None = None

    @property
    def total(self) -> int:
        return len(self.hits)


def result_href(url: str, query: str) -> str:
    """Link to url with the query embedded in the fragment."""
    return f"{url}#{FRAGMENT_PARAM}={quote(query, safe=_URI_COMPONENT_SAFE)}"


class SearchEngine:
    """
    In-memory title/content search over a loaded index.

    One instance per page: it owns the index and the pending debounce
    timer. Lifecycle is load() -> init(render) -> on_input()/on_confirm()
    -> teardown().
    """

    def __init__(
        self,
        index: SearchIndex | None = None,
        scoring_config: ScoringConfig | None = None,
        min_query_length: int = settings.MIN_QUERY_LEN,
        context_length: int = settings.SNIPPET_CONTEXT,
        title_excerpt_length: int = settings.TITLE_EXCERPT_LEN,
        debounce_delay: float = settings.DEBOUNCE_DELAY,
        lang: str = "en",
    ):
        self.index = index if index is not None else SearchIndex(settings.INDEX_SOURCE)
        self.scorer = MatchScorer(scoring_config)
        self.min_query_length = min_query_length
        self.context_length = context_length
        self.title_excerpt_length = title_excerpt_length
        self.lang = lang
        self._render: Callable[[SearchResult], None] | None = None
        self._debouncer = Debouncer(debounce_delay, self._run)

    # --- Lifecycle ---

    async def load(self, source: str | None = None) -> bool:
        """Load the index. Searches before this completes find nothing."""
        return await self.index.load(source)

    def init(self, render: Callable[[SearchResult], None] | None) -> bool:
        """
        Attach the render target for interactive searches.

        Without a render target the interactive search is unavailable and
        input events are ignored.
        """
        if render is None:
            logger.debug("No render target, interactive search disabled")
            return False
        self._render = render
        return True

    def teardown(self) -> None:
        self._debouncer.cancel()
        self._render = None

    # --- Input events ---

    def on_input(self, value: str) -> None:
        """Schedule a search; a later keystroke within the delay replaces it."""
        if self._render is None:
            return
        self._debouncer.trigger(value)

    def on_confirm(self, value: str) -> SearchResult | None:
        """Search immediately, dropping any pending debounced search."""
        if self._render is None:
            return None
        self._debouncer.cancel()
        return self._run(value)

    def _run(self, value: str) -> SearchResult | None:
        if self._render is None:
            return None
        result = self.search(value)
        self._render(result)
        return result

    # --- Search ---

    def search(
        self,
        query: str,
        index: SearchIndex | list[Document] | None = None,
        lang: str | None = None,
    ) -> SearchResult:
        """
        Search documents and render the results.

        Args:
            query: Raw user input; surrounding whitespace is ignored.
            index: Documents to search. Defaults to this engine's index.
            lang: Message language. Defaults to the engine's language.

        Returns:
            SearchResult in the cleared, hint or results state.
        """
        query = (query or "").strip()
        lang = lang or self.lang
        msg = get_messages(lang)

        if not query:
            return SearchResult(query=query, state=SearchState.CLEARED)

        if len(query) < self.min_query_length:
            return SearchResult(
                query=query,
                state=SearchState.HINT,
                message=msg["hint"].format(min_len=self.min_query_length),
            )

        documents = self.index if index is None else index
        scored = self._score_documents(documents, query)
        hits = [
            hit
            for hit in (self._render_match(match, query) for match in scored)
            if hit is not None
        ]

        return SearchResult(
            query=query,
            state=SearchState.RESULTS,
            hits=hits,
            message=None if hits else msg["no_results"].format(query=query),
            announcement=announce_count(len(hits), lang),
        )

    def _score_documents(self, documents, query: str) -> list[ScoredMatch]:
        """Score all documents, keep matches, sort by score (stable)."""
        scored = [self.scorer.score(doc, query) for doc in documents]
        matches = [m for m in scored if m.score > 0]
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches

    def _render_match(self, match: ScoredMatch, query: str) -> RenderedResult | None:
        doc = match.document
        excerpt_html: str | None = None

        if match.match_location == MatchLocation.TITLE:
            excerpt_html = title_excerpt(doc.content, self.title_excerpt_length)
        elif match.match_location == MatchLocation.CONTENT:
            excerpt = extract_snippet(doc.content, query, self.context_length)
            # Fuzzy-only content matches have no literal occurrence to show
            if not excerpt:
                return None
            excerpt_html = highlight(excerpt, query)

        return RenderedResult(
            title_html=highlight(doc.title, query),
            excerpt_html=excerpt_html,
            href=result_href(doc.url, query),
            score=match.score,
        )
