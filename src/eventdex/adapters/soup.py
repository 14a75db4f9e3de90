"""BeautifulSoup markup exposed through the ``TextNode`` interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bs4.element import PageElement

_NON_TEXT_TAGS = frozenset({"script", "style", "template"})


@dataclass(frozen=True, slots=True)
class SoupNode:
    """Read-only view of a bs4 element; text leaves wrap ``NavigableString``."""

    element: Tag | NavigableString

    @property
    def tag(self) -> str | None:
        if isinstance(self.element, Tag):
            return self.element.name
        return None

    @property
    def class_list(self) -> tuple[str, ...]:
        if not isinstance(self.element, Tag):
            return ()
        classes = self.element.get("class")
        if classes is None:
            return ()
        if isinstance(classes, str):
            return tuple(classes.split())
        return tuple(classes)

    @property
    def children(self) -> tuple[SoupNode, ...]:
        if not isinstance(self.element, Tag) or self.element.name in _NON_TEXT_TAGS:
            return ()
        return tuple(wrap_children(self.element.children))

    @property
    def text(self) -> str:
        if isinstance(self.element, Tag):
            return self.element.get_text(" ", strip=True)
        return str(self.element)


def wrap_children(elements: Iterable[PageElement]) -> list[SoupNode]:
    """Wrap tags and plain strings; comments, doctypes and CDATA are dropped."""

    nodes: list[SoupNode] = []
    for element in elements:
        if isinstance(element, PreformattedString):
            continue
        if isinstance(element, Tag | NavigableString):
            nodes.append(SoupNode(element))
    return nodes


def parse_markup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def select_nodes(markup: str | BeautifulSoup, selector: str) -> list[SoupNode]:
    """Return the elements matching a CSS ``selector`` as ``TextNode`` roots."""

    soup = parse_markup(markup) if isinstance(markup, str) else markup
    return [SoupNode(element) for element in soup.select(selector)]


def document_nodes(markup: str | BeautifulSoup) -> list[SoupNode]:
    """Return the top-level nodes of a whole document."""

    soup = parse_markup(markup) if isinstance(markup, str) else markup
    return wrap_children(soup.children)


__all__ = ["SoupNode", "document_nodes", "parse_markup", "select_nodes", "wrap_children"]
