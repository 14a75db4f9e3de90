"""Species resolution engine."""

from __future__ import annotations

from .contracts import (
    DuplicateLine,
    IssueKind,
    IssueReporter,
    LineOutcome,
    LineStatus,
    MatchResult,
    ResolutionIssue,
    ResolvedLine,
    SkippedLine,
    TierLine,
    UnresolvedLine,
    log_issue,
)
from .matcher import SpeciesMatcher, match_all, with_shiny
from .rules import DEFAULT_RULES, MatchingRules
from .tiers import ActiveTier, NoTier, TierState

__all__ = [
    "DEFAULT_RULES",
    "ActiveTier",
    "DuplicateLine",
    "IssueKind",
    "IssueReporter",
    "LineOutcome",
    "LineStatus",
    "MatchResult",
    "MatchingRules",
    "NoTier",
    "ResolutionIssue",
    "ResolvedLine",
    "SkippedLine",
    "SpeciesMatcher",
    "TierLine",
    "TierState",
    "UnresolvedLine",
    "log_issue",
    "match_all",
    "with_shiny",
]
