"""
Query Highlighting

Wraps literal query occurrences in emphasis markup.

The input text is trusted: it is either an excerpt taken from the index or
a known title, so it is neither escaped nor sanitised here.
"""

import re


def query_pattern(query: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching query as literal text."""
    return re.compile(re.escape(query), re.IGNORECASE)


def highlight(text: str, query: str) -> str:
    """
    Wrap every case-insensitive occurrence of query in text.

    Args:
        text: Plain text or already-known markup.
        query: Literal text to highlight. Empty means no highlighting.

    Returns:
        HTML string with the original casing of each match preserved.
    """
    if not query:
        return text

    def replace_fn(match):
        return f"<mark>{match.group(0)}</mark>"

    return query_pattern(query).sub(replace_fn, text)


def split_on_query(text: str, query: str) -> list[tuple[str, bool]]:
    """
    Split text into (segment, is_match) pairs around query occurrences.

    Used where markup is built as nodes rather than strings.
    """
    if not query:
        return [(text, False)] if text else []

    segments: list[tuple[str, bool]] = []
    pos = 0
    for match in query_pattern(query).finditer(text):
        if match.start() > pos:
            segments.append((text[pos : match.start()], False))
        segments.append((match.group(0), True))
        pos = match.end()
    if pos < len(text):
        segments.append((text[pos:], False))
    return segments
