"""
System Router

Health endpoint reporting whether the search index has been loaded.
"""

from fastapi import APIRouter

from sitesearch.web.services import search_engine

router = APIRouter()


@router.get("/health")
async def health():
    index = search_engine.index
    return {
        "ok": True,
        "index_loaded": index.loaded,
        "documents": len(index),
    }
