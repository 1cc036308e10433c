"""Post-navigation highlighting of the query carried in the URL fragment."""

from sitesearch.annotate.annotator import (
    Highlight,
    PageAnnotator,
    query_from_url,
    strip_fragment,
)
from sitesearch.annotate.html import HtmlSurface
from sitesearch.annotate.surface import Surface, TreeSurface
from sitesearch.annotate.tree import Element, TextNode

__all__ = [
    "Highlight",
    "PageAnnotator",
    "query_from_url",
    "strip_fragment",
    "HtmlSurface",
    "Surface",
    "TreeSurface",
    "Element",
    "TextNode",
]
