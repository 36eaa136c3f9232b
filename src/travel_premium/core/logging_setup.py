"""Process-wide logging setup."""

from __future__ import annotations

import logging

from travel_premium.core.config import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from the logging config section."""
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown logging level: {config.level}")
    logging.basicConfig(level=level, format=config.format, force=True)
