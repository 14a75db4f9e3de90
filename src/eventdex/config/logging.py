"""Shared logging helpers for eventdex."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "EVENTDEX_LOG_LEVEL"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Set up the root logger for CLI runs.

    A no-op when the root logger already has handlers, unless ``force`` is set.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def get_log_level() -> int:
    """Return the level named by ``EVENTDEX_LOG_LEVEL`` (default INFO)."""

    name = optional_env_var(LOG_LEVEL_ENV_VAR)
    if name is None:
        return logging.INFO
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {name!r}")
    return level
