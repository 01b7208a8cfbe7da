"""
Logging configuration for amrcatalog.

Apply with logging.config.dictConfig(get_logging_config()).
"""

import logging
import logging.config
from typing import Dict, Any, Optional

from amrcatalog.config.provider import EnvConfigProvider


class LegacyAliasFilter(logging.Filter):
    """Filter to suppress legacy AMR alias warnings."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out legacy alias notices from the authentication module."""
        if record.name.startswith("amrcatalog.modules.authentication"):
            if "legacy authentication method alias" in record.getMessage():
                return False
        return True


def get_logging_config(
    level: Optional[str] = None, suppress_legacy_alias_warnings: bool = False
) -> Dict[str, Any]:
    """Get logging configuration, defaulting the level to AMR_LOG_LEVEL."""
    if level is None:
        level = EnvConfigProvider().get_catalog_config().log_level

    default_handler = {
        "class": "logging.StreamHandler",
        "formatter": "default",
        "stream": "ext://sys.stdout",
    }
    if suppress_legacy_alias_warnings:
        default_handler["filters"] = ["legacy_alias_filter"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "legacy_alias_filter": {
                "()": LegacyAliasFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": default_handler
        },
        "loggers": {
            "amrcatalog": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: Optional[str] = None, **kwargs) -> None:
    """Apply get_logging_config() to the logging system."""
    logging.config.dictConfig(get_logging_config(level, **kwargs))
