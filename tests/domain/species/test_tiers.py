from __future__ import annotations

import pytest

from eventdex.domain.species import DEFAULT_RULES, ActiveTier, NoTier
from eventdex.domain.species.tiers import detect_tier_label, initial_tier, tier_kind


@pytest.mark.parametrize(
    ("text", "label"),
    [
        ("five-star raids", "5"),
        ("one-star raids", "1"),
        ("six-star raids", "6"),
        ("mega raids", "mega"),
        ("shadow raids", "Shadow"),
    ],
)
def test_detect_tier_label_maps_raid_levels(text: str, label: str) -> None:
    assert detect_tier_label(text, DEFAULT_RULES) == label


def test_detect_tier_label_ignores_prose() -> None:
    assert detect_tier_label("giratina will return to five-star raids", DEFAULT_RULES) is None
    assert detect_tier_label("pikachu", DEFAULT_RULES) is None


def test_initial_tier_uses_caller_kind() -> None:
    assert initial_tier(None) == NoTier()
    assert initial_tier("mega") == ActiveTier("mega")
    assert tier_kind(initial_tier("5")) == "5"
    assert tier_kind(NoTier()) is None
