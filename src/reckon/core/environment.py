"""
Environment configuration for reckon.

The RECKON_ENV environment variable follows the usual
development/test/production convention (RAILS_ENV, NODE_ENV, FLASK_ENV).

Environment values:
    - development (default): INFO logging
    - test: INFO logging
    - production: WARNING logging

RECKON_LOG_LEVEL overrides the level chosen from the environment or from
reckon.toml.

Usage:
    from reckon.core.environment import get_reckon_env, resolve_log_level

    env = get_reckon_env()  # Returns "development", "test", or "production"
    level = resolve_log_level(cli_level=None, manifest_level="DEBUG")
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum


class ReckonEnv(StrEnum):
    """Runtime environment values."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


RECKON_ENV_VAR = "RECKON_ENV"
RECKON_LOG_LEVEL_VAR = "RECKON_LOG_LEVEL"

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_reckon_env() -> ReckonEnv:
    """Get the current environment from RECKON_ENV.

    Returns:
        ReckonEnv: The current environment. Defaults to development if
        RECKON_ENV is not set or invalid.

    Examples:
        >>> import os
        >>> os.environ["RECKON_ENV"] = "production"
        >>> get_reckon_env()
        <ReckonEnv.PRODUCTION: 'production'>
    """
    env_value = os.environ.get(RECKON_ENV_VAR, "").lower().strip()

    if env_value in ("production", "prod"):
        return ReckonEnv.PRODUCTION
    elif env_value in ("test", "testing"):
        return ReckonEnv.TEST
    elif env_value in ("development", "dev", ""):
        return ReckonEnv.DEVELOPMENT
    else:
        logging.getLogger(__name__).warning(
            "Unknown RECKON_ENV value '%s'. "
            "Valid values: development, test, production. Defaulting to development.",
            env_value,
        )
        return ReckonEnv.DEVELOPMENT


def default_log_level() -> str:
    """Log level implied by RECKON_ENV alone."""
    if get_reckon_env() == ReckonEnv.PRODUCTION:
        return "WARNING"
    return "INFO"


def resolve_log_level(cli_level: str | None = None, manifest_level: str | None = None) -> str:
    """Pick the effective log level.

    Resolution order:
    1. ``cli_level`` (the ``--log-level`` option)
    2. RECKON_LOG_LEVEL
    3. ``manifest_level`` (``[logging] level`` in reckon.toml)
    4. The RECKON_ENV default

    Unknown level names are skipped with a warning.
    """
    candidates = (
        cli_level,
        os.environ.get(RECKON_LOG_LEVEL_VAR),
        manifest_level,
    )
    for candidate in candidates:
        if not candidate:
            continue
        level = candidate.upper().strip()
        if level in _VALID_LEVELS:
            return level
        logging.getLogger(__name__).warning("Ignoring unknown log level '%s'", candidate)
    return default_log_level()
