"""Data tables steering the species matcher."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from eventdex.domain import vocabulary

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchingRules:
    """Vocabulary and override tables consulted around the general algorithm.

    Defaults come from ``eventdex.domain.vocabulary``; the config layer may
    extend ``name_overrides`` from the environment.
    """

    known_forms: frozenset[str] = vocabulary.KNOWN_FORMS
    special_case_ids: Mapping[str, str] = field(
        default_factory=lambda: dict(vocabulary.SPECIAL_CASE_IDS)
    )
    name_overrides: Mapping[str, str] = field(
        default_factory=lambda: dict(vocabulary.NAME_OVERRIDES)
    )
    mega_variants: Mapping[int, Mapping[str, str]] = field(
        default_factory=lambda: dict(vocabulary.MEGA_VARIANTS)
    )
    raid_level_mappings: Mapping[str, str] = field(
        default_factory=lambda: dict(vocabulary.RAID_LEVEL_MAPPINGS)
    )
    tier_line_exclusions: tuple[str, ...] = vocabulary.TIER_LINE_EXCLUSIONS
    ignored_line_keywords: tuple[str, ...] = vocabulary.IGNORED_LINE_KEYWORDS
    whitelist_keywords: tuple[str, ...] = vocabulary.WHITELIST_KEYWORDS
    blacklisted_keywords: tuple[str, ...] = vocabulary.BLACKLISTED_KEYWORDS

    def with_name_overrides(self, overrides: Mapping[str, str]) -> MatchingRules:
        """Return a copy whose name overrides are extended by ``overrides``."""

        merged = {**self.name_overrides, **overrides}
        return replace(self, name_overrides=merged)


DEFAULT_RULES = MatchingRules()
