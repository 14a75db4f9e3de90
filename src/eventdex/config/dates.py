"""Date normalizer configuration values."""

from __future__ import annotations

from dataclasses import replace

from eventdex.domain.date_ranges import DEFAULT_DATE_RULES, DateRules

from .env import optional_env_int
from .errors import ConfigurationError

WEEKEND_YEAR_ENV_VAR = "EVENTDEX_WEEKEND_YEAR"


def get_date_rules(*, base: DateRules = DEFAULT_DATE_RULES) -> DateRules:
    year = optional_env_int(WEEKEND_YEAR_ENV_VAR)
    if year is None:
        return base
    if not 1 <= year <= 9999:
        raise ConfigurationError(f"{WEEKEND_YEAR_ENV_VAR} is out of range: {year}")
    return replace(base, weekend_default_year=year)
