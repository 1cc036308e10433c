"""Search API Router - JSON search endpoint."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from sitesearch.search import SearchState
from sitesearch.web.services import clamp_query, search_engine

logger = logging.getLogger(__name__)

router = APIRouter()


class SearchHitOut(BaseModel):
    title_html: str
    excerpt_html: str | None = None
    href: str
    score: int


class SearchResponse(BaseModel):
    query: str
    state: SearchState
    total: int
    message: str | None = None
    announcement: str | None = None
    hits: list[SearchHitOut]


@router.get("/search", response_model=SearchResponse)
async def api_search(q: str | None = None, lang: str | None = None):
    """
    Search API (JSON).

    Queries shorter than the minimum length return the ``hint`` state
    without scoring; an empty query returns ``cleared``.
    """
    query = clamp_query(q)
    result = search_engine.search(query, lang=lang)
    if result.state == SearchState.RESULTS and not search_engine.index.loaded:
        logger.warning("Search served before the index finished loading")

    return SearchResponse(
        query=result.query,
        state=result.state,
        total=result.total,
        message=result.message,
        announcement=result.announcement,
        hits=[
            SearchHitOut(
                title_html=hit.title_html,
                excerpt_html=hit.excerpt_html,
                href=hit.href,
                score=hit.score,
            )
            for hit in result.hits
        ],
    )
