"""Tier carry-forward state for one resolution batch.

A batch starts with no active tier (or with the kind supplied by the caller).
A header line such as ``Five-star raids`` switches to an active tier whose
label annotates every match after it, until the next header.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rules import MatchingRules

_TIER_SUFFIX = " raids"


@dataclass(frozen=True, slots=True)
class NoTier:
    pass


@dataclass(frozen=True, slots=True)
class ActiveTier:
    label: str


type TierState = NoTier | ActiveTier


def initial_tier(kind: str | None) -> TierState:
    return ActiveTier(kind) if kind else NoTier()


def tier_kind(state: TierState) -> str | None:
    if isinstance(state, ActiveTier):
        return state.label
    return None


def detect_tier_label(text: str, rules: MatchingRules) -> str | None:
    """Return the tier label if ``text`` is a ``<label> raids`` header line."""

    index = text.find(_TIER_SUFFIX)
    if index == -1:
        return None
    if any(exclusion in text for exclusion in rules.tier_line_exclusions):
        return None
    label = text[:index].strip()
    for source, target in rules.raid_level_mappings.items():
        label = label.replace(source, target)
    return label
