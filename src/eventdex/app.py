"""Application orchestration entry points."""

from __future__ import annotations

import json
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from eventdex.adapters.gamemaster import parse_catalog
from eventdex.adapters.soup import select_nodes
from eventdex.config import get_date_rules, get_matching_rules
from eventdex.domain.catalog import DomainKind, domain_for
from eventdex.domain.date_ranges import DEFAULT_CLOCK, parse_date_range
from eventdex.domain.species import SpeciesMatcher, log_issue
from eventdex.domain.text_extraction import extract_species_from_nodes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from eventdex.domain.catalog import CatalogEntry, CatalogIndex, SpeciesId
    from eventdex.domain.date_ranges import Clock, DateRange, DateRules
    from eventdex.domain.species import IssueReporter, LineOutcome, MatchingRules, MatchResult


log = getLogger(__name__)


def load_catalog_file(path: str | Path) -> dict[SpeciesId, CatalogEntry]:
    """Read a game-master style JSON catalog from disk."""

    catalog_path = Path(path)
    with catalog_path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict | list):
        raise ValueError(f"Catalog file {catalog_path} must hold a JSON object or array")
    return parse_catalog(payload)


def build_matcher(
    catalog: CatalogIndex,
    *,
    domain_kind: DomainKind = DomainKind.NORMAL,
    rules: MatchingRules | None = None,
    report: IssueReporter = log_issue,
) -> SpeciesMatcher:
    effective_rules = rules or get_matching_rules()
    return SpeciesMatcher(
        catalog,
        domain_for(domain_kind, catalog),
        rules=effective_rules,
        report=report,
    )


def resolve_species_lines(
    lines: Sequence[str],
    catalog: CatalogIndex,
    *,
    domain_kind: DomainKind = DomainKind.NORMAL,
    kind: str | None = None,
    rules: MatchingRules | None = None,
    report: IssueReporter = log_issue,
) -> list[LineOutcome]:
    """Resolve scraped lines against one domain of ``catalog``, line by line."""

    matcher = build_matcher(catalog, domain_kind=domain_kind, rules=rules, report=report)
    log.info(
        "Resolving %s lines: domain=%s, candidates=%s, kind=%s",
        len(lines),
        domain_kind,
        len(domain_for(domain_kind, catalog)),
        kind,
    )
    outcomes = matcher.resolve_lines(lines, kind=kind)
    log.info("Finished resolving: %s", _status_counts(outcomes))
    return outcomes


def extract_species_from_markup(
    markup: str,
    selector: str,
    catalog: CatalogIndex,
    *,
    domain_kind: DomainKind = DomainKind.NORMAL,
    kind: str | None = None,
    rules: MatchingRules | None = None,
) -> list[MatchResult]:
    """Resolve the species listed in the elements of ``markup`` matching ``selector``."""

    matcher = build_matcher(catalog, domain_kind=domain_kind, rules=rules)
    return extract_species_from_nodes(select_nodes(markup, selector), matcher, kind=kind)


def parse_event_dates(
    phrases: Sequence[str],
    *,
    rules: DateRules | None = None,
    clock: Clock | None = None,
) -> dict[str, list[DateRange]]:
    """Parse each phrase independently; unreadable phrases map to ``[]``."""

    effective_rules = rules or get_date_rules()
    effective_clock = clock or DEFAULT_CLOCK
    parsed: dict[str, list[DateRange]] = {}
    for phrase in phrases:
        parsed[phrase] = parse_date_range(phrase, rules=effective_rules, clock=effective_clock)
        if not parsed[phrase]:
            log.warning("No date range found in %r", phrase)
    return parsed


def _status_counts(outcomes: Sequence[LineOutcome]) -> str:
    counts: dict[str, int] = {}
    for outcome in outcomes:
        counts[outcome.status] = counts.get(outcome.status, 0) + 1
    return ", ".join(f"{status}={count}" for status, count in sorted(counts.items()))
