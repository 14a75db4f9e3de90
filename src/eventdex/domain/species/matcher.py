"""Resolve free-text species mentions against a restricted catalog domain.

Matching policy is a funnel of increasingly specific filters:
- exact-name special cases and direct id hits are accepted immediately
- otherwise the base species is isolated by whole-word name matches
- form qualifiers in the text pick one entry among that species' forms

Any step that leaves more than one candidate is a hard failure reported
through the ``IssueReporter``; the matcher never guesses.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from eventdex.domain.normalization import (
    collapse_whitespace,
    contains_phrase,
    diacritic_fold,
    find_phrase,
    idify,
    strip_decorations,
)

from .contracts import (
    DuplicateLine,
    IssueKind,
    MatchResult,
    ResolutionIssue,
    ResolvedLine,
    SkippedLine,
    TierLine,
    UnresolvedLine,
    log_issue,
)
from .rules import DEFAULT_RULES
from .tiers import ActiveTier, NoTier, TierState, detect_tier_label, initial_tier, tier_kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from eventdex.domain.catalog import CatalogEntry, CatalogIndex, SpeciesId

    from .contracts import IssueReporter, LineOutcome
    from .rules import MatchingRules

log = logging.getLogger(__name__)

_PARENTHETICAL = re.compile(r"\(([^)]*)\)")
_STATUS_WORDS = frozenset({"shadow", "mega"})
_COSTUME_MARKER = " wearing"

type Resolution = CatalogEntry | ResolutionIssue


@dataclass(frozen=True, slots=True)
class _IndexedEntry:
    """Catalog entry with its comparison keys precomputed."""

    entry: CatalogEntry
    folded_name: str
    base_name: str
    form_tokens: frozenset[str]


def _index_entry(entry: CatalogEntry) -> _IndexedEntry:
    folded = strip_decorations(entry.species_name)
    qualifiers = " ".join(_PARENTHETICAL.findall(folded)).split()
    base_words = _PARENTHETICAL.sub(" ", folded).split()
    return _IndexedEntry(
        entry=entry,
        folded_name=folded,
        base_name=" ".join(word for word in base_words if word not in _STATUS_WORDS),
        form_tokens=frozenset(word for word in qualifiers if word not in _STATUS_WORDS),
    )


def _without_parentheses(text: str) -> str:
    return collapse_whitespace(text.replace("(", " ").replace(")", " "))


def _strip_costume(line: str) -> str:
    index = line.lower().find(_COSTUME_MARKER)
    return line if index == -1 else line[:index]


def _ids(candidates: Iterable[_IndexedEntry]) -> tuple[SpeciesId, ...]:
    return tuple(candidate.entry.species_id for candidate in candidates)


class SpeciesMatcher:
    """Species resolution engine bound to one catalog and one restricted domain.

    ``catalog`` is the full index, used for the few lookups that must escape the
    domain: direct id hits, shadow forms, and megas under a mega tier. ``domain``
    scopes base-name and form matching. Both are read-only; a matcher may be
    shared across batches.
    """

    def __init__(
        self,
        catalog: CatalogIndex,
        domain: Iterable[CatalogEntry],
        *,
        rules: MatchingRules = DEFAULT_RULES,
        report: IssueReporter = log_issue,
    ) -> None:
        self._catalog = catalog
        self._rules = rules
        self._report = report
        self._domain = tuple(_index_entry(entry) for entry in domain)
        self._domain_ids = frozenset(_ids(self._domain))
        self._shadow_pool = tuple(
            _index_entry(entry)
            for entry in catalog.values()
            if entry.is_shadow and not entry.is_mega and not entry.is_alias
        )
        self._mega_pool = tuple(
            _index_entry(entry)
            for entry in catalog.values()
            if entry.is_mega and not entry.is_shadow and not entry.is_alias
        )
        self._known_forms = frozenset(diacritic_fold(form) for form in rules.known_forms)

    @property
    def rules(self) -> MatchingRules:
        return self._rules

    # ------------------------------------------------------------------ batch

    def match_all(self, lines: Sequence[str], *, kind: str | None = None) -> list[MatchResult]:
        """Resolve every line, returning one result per newly seen species id.

        ``kind`` seeds the tier annotation before the first tier header line.
        """

        return [
            outcome.result
            for outcome in self.resolve_lines(lines, kind=kind)
            if isinstance(outcome, ResolvedLine)
        ]

    def resolve_lines(self, lines: Sequence[str], *, kind: str | None = None) -> list[LineOutcome]:
        """Resolve every line and return the outcome of each, in input order."""

        state = initial_tier(kind)
        seen: set[SpeciesId] = set()
        outcomes: list[LineOutcome] = []
        for line in lines:
            state, outcome = self._step(state, line, seen)
            if isinstance(outcome, UnresolvedLine):
                self._report(outcome.issue)
            elif isinstance(outcome, ResolvedLine):
                seen.add(outcome.result.species_id)
            outcomes.append(outcome)
        return outcomes

    def _step(
        self,
        state: TierState,
        line: str,
        seen: set[SpeciesId],
    ) -> tuple[TierState, LineOutcome]:
        text = strip_decorations(_strip_costume(line), self._rules.name_overrides)
        if not text:
            return state, SkippedLine(line=line, reason="empty")
        if any(keyword in text for keyword in self._rules.ignored_line_keywords):
            log.debug("Skipping non-species line %r", line)
            return state, SkippedLine(line=line, reason="ignored keyword")

        label = detect_tier_label(text, self._rules)
        if label is not None:
            log.debug("Tier changed to %r by line %r", label, line)
            next_state: TierState = ActiveTier(label) if label else NoTier()
            return next_state, TierLine(line=line, label=label)

        words = text.split()
        shadow = "shadow" in words
        mega = "mega" in words
        remaining = " ".join(word for word in words if word not in _STATUS_WORDS)

        kind = tier_kind(state)
        resolution = self.resolve_text(remaining, shadow=shadow, mega=mega, tier=kind)
        if isinstance(resolution, ResolutionIssue):
            return state, UnresolvedLine(line=line, issue=resolution)
        if resolution.species_id in seen:
            return state, DuplicateLine(line=line, species_id=resolution.species_id)
        return state, ResolvedLine(
            line=line,
            result=MatchResult(species_id=resolution.species_id, kind=kind),
        )

    # ------------------------------------------------------------- one text

    def resolve_text(
        self,
        text: str,
        *,
        shadow: bool = False,
        mega: bool = False,
        tier: str | None = None,
    ) -> Resolution:
        """Resolve an already normalized mention with shadow/mega words removed."""

        if not mega and text in self._rules.special_case_ids:
            return self._special_case(text, self._rules.special_case_ids[text], shadow=shadow)

        if not shadow and not mega:
            direct = self._direct_hit(text)
            if direct is not None:
                return direct

        plain = _without_parentheses(text)
        bases = self._isolate_base(plain)
        if not bases:
            return self._resolve_form_only(plain, shadow=shadow, mega=mega)
        dexes = {candidate.entry.dex for candidate in bases}
        if len(dexes) > 1:
            return ResolutionIssue(
                kind=IssueKind.AMBIGUOUS_BASE_NAME,
                text=text,
                message="Couldn't isolate the base species name",
                candidates=_ids(bases),
            )
        return self._resolve_form(dexes.pop(), plain, shadow=shadow, mega=mega, tier=tier)

    def _direct_hit(self, text: str) -> CatalogEntry | None:
        entry = self._catalog.get(idify(text))
        if entry is None or entry.is_shadow or entry.is_mega:
            return None
        if entry.alias_id is not None and entry.species_id not in self._domain_ids:
            return self._catalog.get(entry.alias_id)
        return entry

    def _special_case(self, text: str, species_id: SpeciesId, *, shadow: bool) -> Resolution:
        if shadow:
            species_id = f"{species_id}_shadow"
        entry = self._catalog.get(species_id)
        if entry is None:
            return ResolutionIssue(
                kind=IssueKind.UNMAPPED_SPECIAL_CASE,
                text=text,
                message=f"Special case maps to {species_id}, which is not in the catalog",
            )
        return entry

    def _isolate_base(self, plain: str) -> list[_IndexedEntry]:
        spans: list[tuple[_IndexedEntry, int, int]] = []
        for candidate in self._domain:
            found = find_phrase(plain, candidate.base_name)
            if found is not None:
                spans.append((candidate, found.start(), found.end()))
        return [
            candidate
            for candidate, start, end in spans
            if not any(
                other_start <= start and end <= other_end and other_end - other_start > end - start
                for _, other_start, other_end in spans
            )
        ]

    def _resolve_form_only(self, plain: str, *, shadow: bool, mega: bool) -> Resolution:
        words = plain.split()
        forms = list(dict.fromkeys(word for word in words if word in self._known_forms))
        if not forms:
            for key, species_id in self._rules.special_case_ids.items():
                if contains_phrase(plain, key):
                    return self._special_case(plain, species_id, shadow=shadow)
            return ResolutionIssue(
                kind=IssueKind.UNMAPPED_SPECIAL_CASE,
                text=plain,
                message="Couldn't map a species or form",
            )
        if len(forms) > 1:
            return ResolutionIssue(
                kind=IssueKind.MULTIPLE_FORMS,
                text=plain,
                message=f"Multiple forms: {', '.join(forms)}",
            )

        form = forms[0]
        candidates = [
            candidate
            for candidate in self._domain
            if form in candidate.form_tokens
            and candidate.entry.is_shadow == shadow
            and candidate.entry.is_mega == mega
        ]
        if len(candidates) > 1:
            rest = [word for word in words if word != form]
            candidates = [
                candidate
                for candidate in candidates
                if all(word in candidate.folded_name for word in rest)
            ]
        return self._single(candidates, plain, missing="Couldn't find form in catalog")

    def _resolve_form(
        self,
        dex: int,
        plain: str,
        *,
        shadow: bool,
        mega: bool,
        tier: str | None,
    ) -> Resolution:
        candidates = self._forms_for_dex(dex, shadow=shadow, mega=mega, tier=tier)
        if len(candidates) == 1:
            return candidates[0].entry

        if mega or (tier or "").casefold() == "mega":
            variant = self._mega_variant(dex, plain)
            if variant is not None:
                return variant

        if not candidates:
            if mega:
                return ResolutionIssue(
                    kind=IssueKind.NO_MEGA_COVERAGE,
                    text=plain,
                    message="Domain doesn't cover megas",
                )
            return ResolutionIssue(
                kind=IssueKind.NO_FORM_MATCH,
                text=plain,
                message="Couldn't find a form",
            )

        mapped = self._filter_by_forms(candidates, plain)
        if not mapped and shadow:
            mapped = [candidate for candidate in candidates if not candidate.form_tokens]
        return self._single(mapped, plain, missing="Couldn't map form")

    def _forms_for_dex(
        self,
        dex: int,
        *,
        shadow: bool,
        mega: bool,
        tier: str | None,
    ) -> list[_IndexedEntry]:
        if mega and (tier or "").casefold() == "mega":
            return [candidate for candidate in self._mega_pool if candidate.entry.dex == dex]
        if shadow and not mega:
            return [candidate for candidate in self._shadow_pool if candidate.entry.dex == dex]
        return [
            candidate
            for candidate in self._domain
            if candidate.entry.dex == dex
            and candidate.entry.is_shadow == shadow
            and candidate.entry.is_mega == mega
        ]

    def _mega_variant(self, dex: int, plain: str) -> Resolution | None:
        variants = self._rules.mega_variants.get(dex, {})
        words = plain.split()
        for token, species_id in variants.items():
            if token in words:
                return self._catalog.get(species_id) or ResolutionIssue(
                    kind=IssueKind.UNMAPPED_SPECIAL_CASE,
                    text=plain,
                    message=f"Mega variant {species_id} is not in the catalog",
                )
        return None

    def _filter_by_forms(
        self,
        candidates: Sequence[_IndexedEntry],
        plain: str,
    ) -> list[_IndexedEntry]:
        """Keep qualified candidates whose forms agree exactly with the text.

        Every qualifier of a kept candidate is in the text, and every known form
        the text names is one of its qualifiers. Nothing is ranked; more than one
        survivor is left for the caller to report.
        """

        named = {word for word in plain.split() if word in self._known_forms}
        return [
            candidate
            for candidate in candidates
            if candidate.form_tokens
            and all(contains_phrase(plain, token) for token in candidate.form_tokens)
            and named <= set(candidate.form_tokens)
        ]

    def _single(
        self,
        candidates: Sequence[_IndexedEntry],
        text: str,
        *,
        missing: str,
    ) -> Resolution:
        if len(candidates) == 1:
            return candidates[0].entry
        if not candidates:
            return ResolutionIssue(kind=IssueKind.NO_FORM_MATCH, text=text, message=missing)
        return ResolutionIssue(
            kind=IssueKind.AMBIGUOUS_FORM,
            text=text,
            message="Multiple matching forms",
            candidates=_ids(candidates),
        )


def match_all(
    lines: Sequence[str],
    domain: Iterable[CatalogEntry],
    catalog: CatalogIndex,
    *,
    kind: str | None = None,
    rules: MatchingRules = DEFAULT_RULES,
    report: IssueReporter = log_issue,
) -> list[MatchResult]:
    """Resolve ``lines`` against ``domain`` in one call."""

    matcher = SpeciesMatcher(catalog, domain, rules=rules, report=report)
    return matcher.match_all(lines, kind=kind)


def with_shiny(result: MatchResult, shiny: bool) -> MatchResult:
    return replace(result, shiny=shiny)
