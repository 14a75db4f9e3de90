"""Species matcher configuration values."""

from __future__ import annotations

from eventdex.domain.species import DEFAULT_RULES, MatchingRules

from .env import optional_env_var
from .errors import ConfigurationError

NAME_OVERRIDES_ENV_VAR = "EVENTDEX_NAME_OVERRIDES"


def parse_name_overrides(raw: str) -> dict[str, str]:
    """Parse ``"palkida=palkia;mr mine=mr. mime"`` into a substitution table.

    Keys and values are lowercased, matching the normalized text they apply to.
    """

    overrides: dict[str, str] = {}
    for pair in raw.split(";"):
        if not pair.strip():
            continue
        source, separator, target = pair.partition("=")
        source = source.strip().lower()
        if not separator or not source:
            raise ConfigurationError(
                f"{NAME_OVERRIDES_ENV_VAR} entries must look like 'from=to', got {pair!r}"
            )
        overrides[source] = target.strip().lower()
    return overrides


def get_matching_rules(*, base: MatchingRules = DEFAULT_RULES) -> MatchingRules:
    raw = optional_env_var(NAME_OVERRIDES_ENV_VAR)
    if raw is None:
        return base
    return base.with_name_overrides(parse_name_overrides(raw))
