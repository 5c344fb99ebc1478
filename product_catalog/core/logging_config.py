"""Logging setup for the application process."""

from __future__ import annotations

import logging.config

from product_catalog.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure root and library loggers from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": settings.log_format},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": level},
            "loggers": {
                # SQL echo is controlled by the engine, keep the logger quiet otherwise
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
