"""
Rendering Surfaces

The annotator never touches a native document directly. It talks to a
surface, which exposes the page as an abstract tree and applies the few
mutations the annotator needs.
"""

import logging
from typing import Protocol, Sequence

from sitesearch.annotate.tree import Element, Node, TextNode, is_attached

logger = logging.getLogger(__name__)


class Surface(Protocol):
    url: str

    def replace_url(self, url: str) -> None: ...

    def containers(self, selectors: Sequence[str]) -> list[Element]: ...

    def wrap(self, node: TextNode, wrapper: Element) -> None: ...

    def scroll_into_view(
        self, element: Element, behavior: str = "smooth", block: str = "center"
    ) -> None: ...

    def add_class(self, element: Element, css_class: str) -> None: ...

    def unwrap(self, wrapper: Element) -> bool: ...


class TreeSurface:
    """
    Surface backed only by the abstract tree.

    Records URL replacements and scroll targets so callers (and tests) can
    observe them.
    """

    def __init__(self, root: Element, url: str = ""):
        self.root = root
        self.url = url
        self.history: list[str] = []
        self.scrolled_to: list[Element] = []
        self.scroll_options: list[tuple[str, str]] = []

    def replace_url(self, url: str) -> None:
        """Swap the current URL without navigating."""
        self.history.append(url)
        self.url = url

    def containers(self, selectors: Sequence[str]) -> list[Element]:
        found = []
        for selector in selectors:
            element = self.root.select_one(selector)
            if element is not None and element not in found:
                found.append(element)
        return found

    def wrap(self, node: TextNode, wrapper: Element) -> None:
        """Replace a text node with the highlight wrapper."""
        if node.parent is None:
            raise ValueError("Cannot wrap a detached text node")
        self._replace(node, wrapper)

    def scroll_into_view(
        self, element: Element, behavior: str = "smooth", block: str = "center"
    ) -> None:
        self.scrolled_to.append(element)
        self.scroll_options.append((behavior, block))

    def add_class(self, element: Element, css_class: str) -> None:
        if css_class not in element.classes:
            element.classes.append(css_class)

    def unwrap(self, wrapper: Element) -> bool:
        """
        Replace the wrapper with its plain text.

        Returns False (and changes nothing) if the wrapper is no longer in
        the tree.
        """
        if not is_attached(wrapper):
            logger.debug("Highlight wrapper already detached, nothing to remove")
            return False
        self._replace(wrapper, TextNode(wrapper.text))
        return True

    def _replace(self, old: Node, new: Node) -> None:
        old.parent.replace_child(old, new)
