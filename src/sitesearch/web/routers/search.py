"""Search UI Router - HTML search page."""

from fastapi import APIRouter, Cookie, Request
from fastapi.responses import HTMLResponse

from sitesearch.i18n.messages import MESSAGES
from sitesearch.search import SearchState
from sitesearch.web.config import settings
from sitesearch.web.services import clamp_query, search_engine
from sitesearch.web.templates import templates

router = APIRouter()


def _detect_language(
    lang_param: str | None, lang_cookie: str | None, accept_language: str | None
) -> str:
    """Detect language priority: Query > Cookie > Header > Default(en)"""
    if lang_param in MESSAGES:
        return lang_param
    if lang_cookie in MESSAGES:
        return lang_cookie
    if accept_language:
        if "ja" in accept_language.lower().split(",")[0]:
            return "ja"
    return "en"


@router.get("/", response_class=HTMLResponse)
async def search_page(
    request: Request,
    q: str | None = None,
    lang: str | None = None,
    user_lang: str | None = Cookie(default=None, alias="lang"),
):
    """Search Page"""
    current_lang = _detect_language(
        lang, user_lang, request.headers.get("accept-language")
    )
    query = clamp_query(q)
    result = search_engine.search(query, lang=current_lang)

    resp = templates.TemplateResponse(
        request,
        "search.html",
        {
            "request": request,
            "q": query,
            "result": result,
            "states": SearchState,
            "lang": current_lang,
            "msg": MESSAGES[current_lang],
            "max_query_len": settings.MAX_QUERY_LEN,
        },
    )

    if lang in MESSAGES:
        resp.set_cookie(key="lang", value=lang)

    return resp
