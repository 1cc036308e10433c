"""
HTML Surface

Adapts a BeautifulSoup document to the annotator's abstract tree. Every
abstract node keeps a reference to its soup node so mutations made on the
tree are mirrored into the document.
"""

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, NavigableString, Tag

from sitesearch.annotate.surface import TreeSurface
from sitesearch.annotate.tree import Element, Node, TextNode

warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


def mirror(tag: Tag) -> Element:
    """Build the abstract tree for tag. Comments and doctypes are left out."""
    element = Element(tag.name, classes=list(tag.get("class") or []), ref=tag)
    for child in tag.children:
        if isinstance(child, Tag):
            element.append(mirror(child))
        elif type(child) is NavigableString:
            element.append(TextNode(str(child), ref=child))
    return element


class HtmlSurface(TreeSurface):
    """Surface over an HTML document parsed with BeautifulSoup."""

    def __init__(self, html: str, url: str = ""):
        self.soup = BeautifulSoup(html, "html.parser")
        super().__init__(mirror(self.soup), url)

    @property
    def html(self) -> str:
        return str(self.soup)

    def add_class(self, element: Element, css_class: str) -> None:
        super().add_class(element, css_class)
        element.ref["class"] = list(element.classes)

    def _replace(self, old: Node, new: Node) -> None:
        super()._replace(old, new)
        old.ref.replace_with(self._to_native(new))

    def _to_native(self, node: Node):
        if isinstance(node, TextNode):
            node.ref = NavigableString(node.text)
            return node.ref
        tag = self.soup.new_tag(node.tag)
        if node.classes:
            tag["class"] = list(node.classes)
        for child in node.children:
            tag.append(self._to_native(child))
        node.ref = tag
        return tag
