"""
Internationalization Messages

UI and screen-reader text for search states.
"""

MESSAGES = {
    "en": {
        "title_default": "Search",
        "header_title": "Search",
        "placeholder": "Search pages...",
        "search_button": "Search",
        "hint": "Type at least {min_len} characters to search...",
        "no_results": 'No results found for "{query}"',
        "announce_no_results": "No results found",
        "announce_one_result": "1 result found",
        "announce_results": "{count} results found",
        "lang_switch_ja": "日本語",
        "lang_switch_en": "English",
    },
    "ja": {
        "title_default": "検索",
        "header_title": "検索",
        "placeholder": "ページを検索...",
        "search_button": "検索",
        "hint": "{min_len}文字以上入力してください...",
        "no_results": "「{query}」に一致する結果は見つかりませんでした",
        "announce_no_results": "結果が見つかりませんでした",
        "announce_one_result": "1件の結果が見つかりました",
        "announce_results": "{count}件の結果が見つかりました",
        "lang_switch_ja": "日本語",
        "lang_switch_en": "English",
    },
}

DEFAULT_LANG = "en"


def get_messages(lang: str | None) -> dict[str, str]:
    return MESSAGES.get(lang or DEFAULT_LANG, MESSAGES[DEFAULT_LANG])


def announce_count(count: int, lang: str | None = None) -> str:
    """Screen-reader announcement for a finished search."""
    msg = get_messages(lang)
    if count == 0:
        return msg["announce_no_results"]
    if count == 1:
        return msg["announce_one_result"]
    return msg["announce_results"].format(count=count)
