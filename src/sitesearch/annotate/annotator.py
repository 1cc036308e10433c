"""
Page Annotator

On page load, highlight the query a search result link carried in the URL
fragment (``#search=<query>``): find its first occurrence in the page
content, wrap it, scroll to it, then fade the highlight out and restore the
plain text.
"""

import logging
from dataclasses import dataclass
from typing import Sequence
from urllib.parse import parse_qs, urlsplit, urlunsplit

from sitesearch.annotate.surface import Surface
from sitesearch.annotate.tree import (
    HIGHLIGHT_FADE_CLASS,
    Element,
    build_highlight,
    find_first_match,
    first_marker,
    is_attached,
)
from sitesearch.core.config import settings
from sitesearch.search.searcher import FRAGMENT_PARAM
from sitesearch.search.timers import TaskScheduler

logger = logging.getLogger(__name__)

# Most specific content container first
DEFAULT_CONTAINERS = ("main", ".content", "body")

SCROLL_BEHAVIOR = "smooth"
SCROLL_BLOCK = "center"


def query_from_url(url: str) -> str | None:
    """Query carried in the URL fragment, or None if absent or malformed."""
    fragment = urlsplit(url).fragment
    if not fragment:
        return None
    try:
        params = parse_qs(fragment, errors="strict")
    except (UnicodeDecodeError, ValueError):
        logger.debug(f"Ignoring malformed search fragment: {fragment!r}")
        return None
    values = params.get(FRAGMENT_PARAM)
    return values[0] if values else None


def strip_fragment(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, parts.query, ""))


@dataclass(eq=False)
class Highlight:
    """An applied page highlight."""

    query: str
    wrapper: Element
    marker: Element | None


class PageAnnotator:
    """
    One-shot post-navigation highlighter.

    The highlight is transient: it is scrolled to after ``scroll_delay``,
    starts fading ``fade_delay`` later and is removed ``remove_delay`` after
    that. Pending steps are cancelled by teardown(); a step that finds its
    wrapper detached does nothing.
    """

    def __init__(
        self,
        containers: Sequence[str] = DEFAULT_CONTAINERS,
        scroll_delay: float = settings.HIGHLIGHT_SCROLL_DELAY,
        fade_delay: float = settings.HIGHLIGHT_FADE_DELAY,
        remove_delay: float = settings.HIGHLIGHT_REMOVE_DELAY,
        scheduler: TaskScheduler | None = None,
    ):
        self.containers = tuple(containers)
        self.scroll_delay = scroll_delay
        self.fade_delay = fade_delay
        self.remove_delay = remove_delay
        self._scheduler = scheduler or TaskScheduler()

    def annotate(self, surface: Surface) -> Highlight | None:
        """
        Highlight the fragment query on surface.

        Must be called with an event loop running; the scroll/fade/remove
        steps are scheduled on it.
        """
        query = query_from_url(surface.url)
        if not query:
            return None

        # Consume the fragment so a reload does not highlight again
        surface.replace_url(strip_fragment(surface.url))

        node = find_first_match(surface.containers(self.containers), query)
        if node is None:
            logger.debug(f"No occurrence of {query!r} on page")
            return None

        wrapper = build_highlight(node.text, query)
        surface.wrap(node, wrapper)
        highlight = Highlight(query=query, wrapper=wrapper, marker=first_marker(wrapper))

        self._scheduler.schedule(self.scroll_delay, self._scroll, surface, highlight)
        return highlight

    def teardown(self) -> None:
        """Cancel pending highlight steps (e.g. on navigation)."""
        self._scheduler.cancel_all()

    def _scroll(self, surface: Surface, highlight: Highlight) -> None:
        if not is_attached(highlight.wrapper):
            return
        if highlight.marker is not None:
            surface.scroll_into_view(
                highlight.marker, behavior=SCROLL_BEHAVIOR, block=SCROLL_BLOCK
            )
        self._scheduler.schedule(self.fade_delay, self._fade, surface, highlight)

    def _fade(self, surface: Surface, highlight: Highlight) -> None:
        if not is_attached(highlight.wrapper):
            return
        if highlight.marker is not None:
            surface.add_class(highlight.marker, HIGHLIGHT_FADE_CLASS)
        self._scheduler.schedule(self.remove_delay, self._remove, surface, highlight)

    def _remove(self, surface: Surface, highlight: Highlight) -> None:
        surface.unwrap(highlight.wrapper)
