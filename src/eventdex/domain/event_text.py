"""Helpers for raid-day and spotlight event titles and descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .catalog import DomainKind, domain_for
from .species import DEFAULT_RULES, SpeciesMatcher, log_issue

if TYPE_CHECKING:
    from .catalog import CatalogIndex
    from .species import IssueReporter, MatchingRules, MatchResult

SPOTLIGHT_MARKER = "Spotlight"
_BONUS_MARKER = "bonus is"


@dataclass(frozen=True, slots=True, kw_only=True)
class TitleSpecies:
    """Species named by an event title and how they were scoped."""

    results: tuple[MatchResult, ...]
    domain_kind: DomainKind
    is_spotlight: bool = False


def split_species_list(text: str) -> list[str]:
    """Split ``"Articuno, Zapdos and Moltres"`` into its names."""

    names = text.replace(", ", ",").replace(" and ", ",").split(",")
    return [name.strip() for name in names if name.strip()]


def domain_kind_for_title(title: str) -> DomainKind:
    """Pick the domain a raid title draws from: ``"... in Mega Raids"`` etc."""

    species_part, _, raid_type = title.partition(" in ")
    if "Mega" in raid_type or "Elite" in raid_type:
        return DomainKind.MEGA
    if "Shadow" in raid_type or "Shadow" in species_part:
        return DomainKind.SHADOW
    return DomainKind.NORMAL


def extract_spotlight_bonus(description: str) -> str | None:
    """Return the phrase after ``bonus is`` up to the next period, if any."""

    _, marker, tail = description.partition(_BONUS_MARKER)
    if not marker:
        return None
    bonus = tail.split(".")[0].strip()
    return bonus or None


def resolve_event_title(
    title: str,
    catalog: CatalogIndex,
    *,
    rules: MatchingRules = DEFAULT_RULES,
    report: IssueReporter = log_issue,
) -> TitleSpecies:
    """Resolve the species a raid-day or spotlight-hour title announces.

    Raid titles yield kind ``mega`` for mega/elite raids and ``5`` otherwise;
    spotlight titles carry no kind.
    """

    domain_kind = domain_kind_for_title(title)
    is_spotlight = SPOTLIGHT_MARKER in title
    kind: str | None = None
    if is_spotlight:
        species_part = title.split(SPOTLIGHT_MARKER)[0]
    else:
        species_part = title.partition(" in ")[0]
        kind = "mega" if domain_kind is DomainKind.MEGA else "5"

    matcher = SpeciesMatcher(catalog, domain_for(domain_kind, catalog), rules=rules, report=report)
    results = matcher.match_all(split_species_list(species_part), kind=kind)
    return TitleSpecies(
        results=tuple(results),
        domain_kind=domain_kind,
        is_spotlight=is_spotlight,
    )
