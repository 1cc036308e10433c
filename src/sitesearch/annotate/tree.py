"""
Abstract Text-Node Tree

A minimal element/text tree that page content is mirrored into, plus the
pure matching functions the annotator runs over it. Rendering surfaces
translate their native nodes to and from this tree.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Union

from sitesearch.search.highlight import query_pattern, split_on_query

# Subtrees that never render text
SKIPPED_TAGS = frozenset({"script", "style", "noscript", "template"})

HIGHLIGHT_CONTAINER_CLASS = "search-highlight-container"
HIGHLIGHT_TEXT_CLASS = "search-highlight-text"
HIGHLIGHT_FADE_CLASS = "search-highlight-fade"


@dataclass(eq=False)
class TextNode:
    text: str
    parent: "Element | None" = field(default=None, repr=False)
    # Native node of the rendering surface, if any
    ref: Any = field(default=None, repr=False)


@dataclass(eq=False)
class Element:
    tag: str
    classes: list[str] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)
    parent: "Element | None" = field(default=None, repr=False)
    ref: Any = field(default=None, repr=False)

    def __post_init__(self):
        for child in self.children:
            child.parent = self

    def append(self, child: "Node") -> "Node":
        child.parent = self
        self.children.append(child)
        return child

    def replace_child(self, old: "Node", new: "Node") -> None:
        idx = self.children.index(old)
        self.children[idx] = new
        new.parent = self
        old.parent = None

    @property
    def text(self) -> str:
        return "".join(child.text for child in self.children)

    def matches(self, selector: str) -> bool:
        """Match a simple selector: ``tag``, ``.class`` or ``tag.class``."""
        tag, _, cls = selector.partition(".")
        if tag and tag != self.tag:
            return False
        if cls and cls not in self.classes:
            return False
        return True

    def select_one(self, selector: str) -> "Element | None":
        """First element (self included) matching selector, depth-first."""
        if self.matches(selector):
            return self
        for child in self.children:
            if isinstance(child, Element):
                found = child.select_one(selector)
                if found is not None:
                    return found
        return None


Node = Union[TextNode, Element]


def is_attached(node: Node) -> bool:
    """True while node is still a child of its recorded parent."""
    parent = node.parent
    return parent is not None and any(child is node for child in parent.children)


def iter_text_nodes(root: Element) -> Iterator[TextNode]:
    """
    Yield renderable text nodes under root in document order.

    Script/style subtrees and existing highlight wrappers are skipped, so
    running the annotator twice never nests highlights.
    """
    if root.tag in SKIPPED_TAGS or HIGHLIGHT_CONTAINER_CLASS in root.classes:
        return
    for child in root.children:
        if isinstance(child, TextNode):
            yield child
        else:
            yield from iter_text_nodes(child)


def find_first_match(containers: Iterable[Element], query: str) -> TextNode | None:
    """
    First text node containing query.

    Uses the same case-insensitive literal pattern the highlight markers
    are built with, so a matched node always yields at least one marker.

    Containers are tried in priority order; the scan stops at the first
    container that yields a match.
    """
    if not query:
        return None
    pattern = query_pattern(query)
    for container in containers:
        for node in iter_text_nodes(container):
            if pattern.search(node.text):
                return node
    return None


def build_highlight(text: str, query: str) -> Element:
    """Wrapper element for text with every query occurrence marked."""
    wrapper = Element("span", classes=[HIGHLIGHT_CONTAINER_CLASS])
    for segment, is_match in split_on_query(text, query):
        if is_match:
            wrapper.append(
                Element(
                    "span",
                    classes=[HIGHLIGHT_TEXT_CLASS],
                    children=[TextNode(segment)],
                )
            )
        else:
            wrapper.append(TextNode(segment))
    return wrapper


def first_marker(wrapper: Element) -> Element | None:
    return wrapper.select_one(f"span.{HIGHLIGHT_TEXT_CLASS}")
