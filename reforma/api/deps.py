"""Runtime configuration for the Reforma API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    """API settings, normally read from the environment by ``load_settings``."""

    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from ``REFORMA_*`` environment variables.

    ``REFORMA_CORS_ORIGINS`` is a comma-separated list of allowed origins.
    ``REFORMA_LOG_LEVEL`` is a standard logging level name; unknown names
    fall back to INFO with a warning.
    """
    raw_origins = os.environ.get("REFORMA_CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

    log_level = os.environ.get("REFORMA_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown REFORMA_LOG_LEVEL %r, using INFO", log_level)
        log_level = "INFO"

    return Settings(
        cors_origins=origins or DEFAULT_CORS_ORIGINS,
        log_level=log_level,
    )
