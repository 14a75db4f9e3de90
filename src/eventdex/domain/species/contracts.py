"""Result and issue types produced by species resolution.

This module intentionally holds only:
- the ``MatchResult`` handed to event assemblers
- per-line outcome dataclasses and their status enum
- the issue taxonomy and the reporter callback contract
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, Protocol

from eventdex.domain.catalog import SpeciesId  # noqa: TC001

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchResult:
    """A resolved species mention, annotated with caller context."""

    species_id: SpeciesId
    shiny: bool = False
    kind: str | None = None


class IssueKind(StrEnum):
    """Why a line could not be resolved to exactly one catalog entry."""

    AMBIGUOUS_BASE_NAME = "ambiguous-base-name"
    NO_FORM_MATCH = "no-form-match"
    MULTIPLE_FORMS = "multiple-forms"
    UNMAPPED_SPECIAL_CASE = "unmapped-special-case"
    NO_MEGA_COVERAGE = "no-mega-coverage"
    AMBIGUOUS_FORM = "ambiguous-form"


_ISSUE_SEVERITY: dict[IssueKind, int] = {
    IssueKind.NO_MEGA_COVERAGE: logging.INFO,
    IssueKind.AMBIGUOUS_BASE_NAME: logging.ERROR,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionIssue:
    kind: IssueKind
    text: str
    message: str
    candidates: tuple[SpeciesId, ...] = ()

    @property
    def severity(self) -> int:
        return _ISSUE_SEVERITY.get(self.kind, logging.WARNING)


class IssueReporter(Protocol):
    """Callback receiving every unresolved line of a batch."""

    def __call__(self, issue: ResolutionIssue) -> None: ...


def log_issue(issue: ResolutionIssue) -> None:
    """Default reporter: log the issue at a severity matching its kind."""

    if issue.candidates:
        log.log(
            issue.severity,
            "%s (%s): %r, candidates=%s",
            issue.message,
            issue.kind,
            issue.text,
            ", ".join(issue.candidates),
        )
        return
    log.log(issue.severity, "%s (%s): %r", issue.message, issue.kind, issue.text)


class LineStatus(StrEnum):
    """Outcome of feeding one input line through the matcher."""

    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    DUPLICATE = "duplicate"
    SKIPPED = "skipped"
    TIER = "tier"


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedLine:
    line: str
    result: MatchResult
    status: Literal[LineStatus.RESOLVED] = LineStatus.RESOLVED


@dataclass(frozen=True, slots=True, kw_only=True)
class UnresolvedLine:
    line: str
    issue: ResolutionIssue
    status: Literal[LineStatus.UNRESOLVED] = LineStatus.UNRESOLVED


@dataclass(frozen=True, slots=True, kw_only=True)
class DuplicateLine:
    """Line resolved to a species already reported earlier in the batch."""

    line: str
    species_id: SpeciesId
    status: Literal[LineStatus.DUPLICATE] = LineStatus.DUPLICATE


@dataclass(frozen=True, slots=True, kw_only=True)
class SkippedLine:
    line: str
    reason: str
    status: Literal[LineStatus.SKIPPED] = LineStatus.SKIPPED


@dataclass(frozen=True, slots=True, kw_only=True)
class TierLine:
    """Tier header such as ``Five-star raids``; annotates the lines after it."""

    line: str
    label: str
    status: Literal[LineStatus.TIER] = LineStatus.TIER


type LineOutcome = ResolvedLine | UnresolvedLine | DuplicateLine | SkippedLine | TierLine
