from sitesearch.search import SearchEngine, SearchIndex
from sitesearch.web.config import settings

# Global instance; the index is loaded by the app lifespan
search_engine = SearchEngine(
    SearchIndex(settings.INDEX_SOURCE, timeout=settings.INDEX_TIMEOUT)
)


def clamp_query(q: str | None) -> str:
    """Trim the raw query and cap its length."""
    query = (q or "").strip()
    if len(query) > settings.MAX_QUERY_LEN:
        query = query[: settings.MAX_QUERY_LEN]
    return query
