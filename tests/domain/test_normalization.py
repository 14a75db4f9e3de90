from __future__ import annotations

import pytest

from eventdex.domain.normalization import (
    collapse_whitespace,
    contains_phrase,
    diacritic_fold,
    find_phrase,
    idify,
    month_index,
    strip_decorations,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Flabébé", "flabebe"),
        ("Farfetch’d", "farfetchd"),
        ("Farfetch'd", "farfetchd"),
        ("PIKACHU", "pikachu"),
    ],
)
def test_diacritic_fold(value: str, expected: str) -> None:
    assert diacritic_fold(value) == expected


def test_diacritic_fold_is_idempotent() -> None:
    once = diacritic_fold("Oricorio (Pa’u)")

    assert diacritic_fold(once) == once
    assert once == "oricorio (pau)"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Pikachu*", "pikachu"),
        ("Giratina Origin Forme", "giratina origin"),
        ("Burmy (Normal)", "burmy"),
        ("Burmy Plant Cloak", "burmy plant"),
        ("  Mr.   Mime  ", "mr. mime"),
    ],
)
def test_strip_decorations(value: str, expected: str) -> None:
    assert strip_decorations(value) == expected


def test_strip_decorations_applies_overrides() -> None:
    assert strip_decorations("Palkida", {"palkida": "palkia"}) == "palkia"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Mr. Mime", "mr_mime"),
        ("Mime Jr", "mime_jr"),
        ("Ho-Oh", "ho_oh"),
        ("Farfetch’d", "farfetchd"),
        ("Nidoran♀", "nidoran_female"),
        ("Nidoran♂", "nidoran_male"),
        ("Alolan Vulpix", "alolan_vulpix"),
    ],
)
def test_idify(value: str, expected: str) -> None:
    assert idify(value) == expected


def test_idify_output_has_no_spaces_or_hyphens() -> None:
    for name in ("Tapu Koko", "Porygon-Z", "Mr. Rime", "Sirfetch'd"):
        result = idify(name)
        assert " " not in result
        assert "-" not in result
        assert result == result.lower()


@pytest.mark.parametrize(
    "name",
    ["Mr. Mime", "Mime Jr.", "Ho-Oh", "Farfetch’d", "Nidoran♀", "Tapu Koko", "Porygon-Z"],
)
def test_idify_is_idempotent(name: str) -> None:
    once = idify(name)

    assert idify(once) == once


def test_month_index_is_zero_based_and_case_insensitive() -> None:
    assert month_index("January") == 0
    assert month_index("december") == 11
    assert month_index("Smarch") is None


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("  a \t b\n c ") == "a b c"


def test_find_phrase_matches_whole_words_only() -> None:
    assert contains_phrase("shadow mew", "mew")
    assert not contains_phrase("mewtwo", "mew")
    assert find_phrase("mewtwo", "") is None
    found = find_phrase("mega charizard y", "charizard")
    assert found is not None
    assert found.span() == (5, 14)
