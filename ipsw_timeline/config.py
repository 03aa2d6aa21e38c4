from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .core import DEFAULT_FEED_URL, DEFAULT_LIMIT, DEFAULT_TIMEOUT


logger = logging.getLogger(__name__)

DEFAULT_COLOR = "auto"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Settings:
    """Defaults for the CLI, read from the environment (and a .env file if present)."""
    feed_url: str = DEFAULT_FEED_URL
    limit: int = DEFAULT_LIMIT
    timeout: float = DEFAULT_TIMEOUT
    color: str = DEFAULT_COLOR
    log_level: str = DEFAULT_LOG_LEVEL


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _env_log_level() -> str:
    level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Ignoring invalid LOG_LEVEL=%r, using %s", level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    # .env values never override variables already set in the environment
    load_dotenv()

    return Settings(
        feed_url=os.getenv("IPSW_FEED_URL", DEFAULT_FEED_URL),
        limit=_env_number("IPSW_LIMIT", DEFAULT_LIMIT, int),
        timeout=_env_number("IPSW_TIMEOUT", DEFAULT_TIMEOUT, float),
        color=os.getenv("IPSW_COLOR", DEFAULT_COLOR),
        log_level=_env_log_level(),
    )
