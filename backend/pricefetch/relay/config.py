"""Runtime settings read from the process environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .coinmarketcap import QUOTES_URL
from .errors import ConfigurationError, MissingCredentialError

logger = logging.getLogger(__name__)

DEFAULT_BROADCAST_CRON = "0 10-23 * * *"


@dataclass(frozen=True, slots=True)
class Settings:
    telegram_token: str
    coinmarketcap_api_key: str
    broadcast_cron: str = DEFAULT_BROADCAST_CRON
    broadcast_timezone: str | None = None
    quotes_url: str = QUOTES_URL
    log_level: str = "INFO"


def _get(environ: Mapping[str, str], name: str) -> str | None:
    """Stripped value of an environment variable, or None if unset or blank."""
    value = environ.get(name, "").strip()
    return value or None


def _require(environ: Mapping[str, str], name: str) -> str:
    value = _get(environ, name)
    if value is None:
        raise MissingCredentialError(f"{name} is required but not set in environment")
    return value


def _log_level(environ: Mapping[str, str]) -> str:
    level = (_get(environ, "LOG_LEVEL") or "INFO").upper()
    # getLevelName maps known names to their numeric level and anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"LOG_LEVEL {level!r} is not a logging level")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    - TELEGRAM_API_KEY       (required) bot token
    - COINMARKETCAP_API_KEY  (required) quote API key
    - BROADCAST_CRON         crontab for the hourly broadcast
    - BROADCAST_TIMEZONE     timezone for BROADCAST_CRON (default: local zone)
    - COINMARKETCAP_URL      quote endpoint override
    - LOG_LEVEL              root log level

    Raises MissingCredentialError if either secret is missing or blank, and
    ConfigurationError if LOG_LEVEL is not a logging level name.
    """
    if environ is None:
        environ = os.environ

    settings = Settings(
        telegram_token=_require(environ, "TELEGRAM_API_KEY"),
        coinmarketcap_api_key=_require(environ, "COINMARKETCAP_API_KEY"),
        broadcast_cron=_get(environ, "BROADCAST_CRON") or DEFAULT_BROADCAST_CRON,
        broadcast_timezone=_get(environ, "BROADCAST_TIMEZONE"),
        quotes_url=_get(environ, "COINMARKETCAP_URL") or QUOTES_URL,
        log_level=_log_level(environ),
    )
    logger.debug("Settings loaded: cron=%r timezone=%r", settings.broadcast_cron, settings.broadcast_timezone)
    return settings
