"""Pure string helpers shared by the species matcher and the date normalizer.

None of these functions raise: input they cannot improve passes through
unchanged (or collapses to an empty string) and the calling engine decides
what an unusable value means.
"""

from __future__ import annotations

import re
import unicodedata
from functools import cache
from typing import TYPE_CHECKING

from .vocabulary import MONTHS

if TYPE_CHECKING:
    from collections.abc import Mapping

_TYPOGRAPHIC_APOSTROPHES = re.compile(r"[\u2019\u2018\u201b\u2032`]")
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_FORME = re.compile(r" forme\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_MONTH_INDEX = {name.casefold(): index for index, name in enumerate(MONTHS)}


def diacritic_fold(value: str) -> str:
    """Lowercase, drop apostrophes of any style and strip combining accents."""

    text = _TYPOGRAPHIC_APOSTROPHES.sub("'", value.lower()).replace("'", "")
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def strip_decorations(value: str, overrides: Mapping[str, str] | None = None) -> str:
    """Fold a scraped species mention and drop decorations that never name a form.

    Removes shiny asterisks, ``Forme``, ``(normal)`` and ``cloak``, then applies
    ``overrides`` as plain substring replacements. Because the replacement is not
    token aware, callers must only pass overrides that cannot collide with other
    names.
    """

    text = _FORME.sub("", value.replace("*", ""))
    text = diacritic_fold(text).replace("(normal)", "").replace(" cloak", "")
    for source, target in (overrides or {}).items():
        text = text.replace(source, target)
    return collapse_whitespace(text)


def idify(value: str) -> str:
    """Convert a display name into the catalog's lowercase snake_case id style."""

    text = value.strip().lower()
    text = text.replace(" (jr)", "_jr")
    text = text.replace("-", "_").replace(". ", "_")
    text = _TYPOGRAPHIC_APOSTROPHES.sub("'", text).replace("'", "")
    text = text.replace(" ", "_")
    return text.replace("♂", "_male").replace("♀", "_female")


def month_index(name: str) -> int | None:
    """Return the zero-based index of an English month name, or ``None``."""

    return _MONTH_INDEX.get(name.strip().casefold())


@cache
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)")


def find_phrase(text: str, phrase: str) -> re.Match[str] | None:
    """Locate ``phrase`` in ``text`` as a whole-word match."""

    if not phrase:
        return None
    return _phrase_pattern(phrase).search(text)


def contains_phrase(text: str, phrase: str) -> bool:
    return find_phrase(text, phrase) is not None
