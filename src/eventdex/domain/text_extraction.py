"""Turn a document subtree into item lines and feed them to the species matcher.

The collector works on any tree exposing ``tag``, ``class_list``, ``children``
and ``text``; ``eventdex.adapters.soup`` wraps BeautifulSoup markup this way.
Text leaves are nodes whose ``tag`` is ``None``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .species import ResolvedLine, with_shiny

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from .species import MatchingRules, MatchResult, SpeciesMatcher

log = logging.getLogger(__name__)

HEADLINE_CLASS = "ContainerBlock__headline"
MAX_ITEM_WORDS = 10
_SHINY_PHRASE = re.compile(r"if you['`’]?re lucky[^\n]*shiny", re.IGNORECASE)
_EXCLUDED_LINES = frozenset({"All"})


class TextNode(Protocol):
    @property
    def tag(self) -> str | None: ...

    @property
    def class_list(self) -> Sequence[str]: ...

    @property
    def children(self) -> Sequence[TextNode]: ...

    @property
    def text(self) -> str: ...


@dataclass(frozen=True, slots=True)
class SimpleNode:
    """Plain in-memory ``TextNode`` implementation."""

    tag: str | None
    text: str = ""
    class_list: tuple[str, ...] = ()
    children: tuple[SimpleNode, ...] = ()

    @classmethod
    def leaf(cls, text: str) -> SimpleNode:
        return cls(tag=None, text=text)


def is_headline(node: TextNode) -> bool:
    return HEADLINE_CLASS in node.class_list


def collect_leaf_texts(
    nodes: Iterable[TextNode],
    *,
    skip: Callable[[TextNode], bool] = is_headline,
) -> list[str]:
    """Collect stripped, non-empty text leaves depth-first in document order.

    Element subtrees for which ``skip`` returns true are not entered.
    """

    texts: list[str] = []
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        if node.tag is None:
            text = node.text.strip()
            if text:
                texts.append(text)
            continue
        if skip(node):
            continue
        stack.extend(reversed(node.children))
    return texts


def is_item_line(line: str, rules: MatchingRules, *, max_words: int = MAX_ITEM_WORDS) -> bool:
    """Whether ``line`` looks like a list entry rather than boilerplate or prose."""

    if line in _EXCLUDED_LINES or len(line.split()) > max_words:
        return False
    lowered = line.lower()
    if any(keyword in lowered for keyword in rules.whitelist_keywords):
        return True
    return not any(keyword in lowered for keyword in rules.blacklisted_keywords)


def filter_item_lines(
    lines: Iterable[str],
    rules: MatchingRules,
    *,
    max_words: int = MAX_ITEM_WORDS,
) -> list[str]:
    return [line for line in lines if is_item_line(line, rules, max_words=max_words)]


def has_shiny_phrase(texts: Iterable[str]) -> bool:
    """Detect the "if you're lucky ... shiny" sentence that marks a whole list."""

    return any(_SHINY_PHRASE.search(text) for text in texts)


def extract_species_from_nodes(
    nodes: Iterable[TextNode],
    matcher: SpeciesMatcher,
    *,
    kind: str | None = None,
) -> list[MatchResult]:
    """Resolve the species listed under ``nodes``.

    A result is shiny when its own line ends with ``*`` or when the subtree
    contains the lucky-shiny phrase anywhere.
    """

    texts = collect_leaf_texts(nodes)
    lines = filter_item_lines(texts, matcher.rules)
    shiny_batch = has_shiny_phrase(texts)
    log.debug("Extracted %s item lines from %s text nodes", len(lines), len(texts))

    results: list[MatchResult] = []
    for outcome in matcher.resolve_lines(lines, kind=kind):
        if isinstance(outcome, ResolvedLine):
            shiny = shiny_batch or outcome.line.rstrip().endswith("*")
            results.append(with_shiny(outcome.result, shiny))
    return results
