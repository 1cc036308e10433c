"""
Snippet Extraction for Search Results

Cuts a KWIC (Key Word In Context) excerpt around the first literal
occurrence of the query, trimmed to word boundaries.
"""

import re

ELLIPSIS = "..."
# Max distance (in characters) a cut may move to reach a word boundary
WORD_BOUNDARY_SLACK = 20


def extract_snippet(content: str, query: str, context_length: int = 60) -> str:
    """
    Extract a bounded excerpt centered on the first occurrence of query.

    Args:
        content: The document text.
        query: Literal text to locate (case-insensitive).
        context_length: Characters of context kept on each side of the match.

    Returns:
        The excerpt, or an empty string when query does not occur literally
        in content.
    """
    if not content or not query:
        return ""

    match = re.search(re.escape(query), content, re.IGNORECASE)
    if match is None:
        return ""

    match_start = match.start()
    start = max(0, match_start - context_length)
    end = min(len(content), match_start + len(query) + context_length)
    cut_head = start > 0
    cut_tail = end < len(content)

    snippet = content[start:end]
    if cut_head:
        snippet = ELLIPSIS + snippet
    if cut_tail:
        snippet = snippet + ELLIPSIS

    # Avoid starting mid-word
    if cut_head:
        first_space = snippet.find(" ", len(ELLIPSIS))
        if first_space != -1 and first_space < WORD_BOUNDARY_SLACK:
            snippet = ELLIPSIS + snippet[first_space + 1 :]

    # Avoid ending mid-word
    if cut_tail:
        last_space = snippet.rfind(" ", 0, len(snippet) - len(ELLIPSIS))
        if last_space != -1 and last_space > len(snippet) - WORD_BOUNDARY_SLACK:
            snippet = snippet[:last_space] + ELLIPSIS

    return snippet.strip()


def title_excerpt(content: str, length: int = 80) -> str:
    """Leading description shown for results that matched on the title."""
    return content[:length] + ELLIPSIS
