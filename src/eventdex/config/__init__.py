"""Application configuration helpers."""

from __future__ import annotations

from .dates import WEEKEND_YEAR_ENV_VAR, get_date_rules
from .env import optional_env_int, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import LOG_LEVEL_ENV_VAR, configure_logging, get_log_level
from .matching import NAME_OVERRIDES_ENV_VAR, get_matching_rules, parse_name_overrides

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "NAME_OVERRIDES_ENV_VAR",
    "WEEKEND_YEAR_ENV_VAR",
    "ConfigurationError",
    "MissingConfigurationError",
    "configure_logging",
    "get_date_rules",
    "get_log_level",
    "get_matching_rules",
    "optional_env_int",
    "optional_env_var",
    "parse_name_overrides",
    "require_env_var",
    "require_env_vars",
]
