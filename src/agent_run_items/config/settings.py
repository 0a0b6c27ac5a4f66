"""
Configuration settings for the run-item package.

Settings come from environment variables (a ``.env`` file is loaded first) or
are built programmatically.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "agent_run_items"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class RunItemSettings:
    """
    Settings for rebuilding and logging run items.

    Environment Variables:
        RUN_ITEMS_STRICT_DESERIALIZATION: Raise on the first bad entry when
            rebuilding serialized items instead of skipping it (default: false)
        RUN_ITEMS_LOG_LEVEL: Level of the package logger (default: WARNING)
    """
    strict_deserialization: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "RunItemSettings":
        """Load settings from environment variables."""
        load_dotenv(dotenv_path)
        return cls(
            strict_deserialization=_env_bool("RUN_ITEMS_STRICT_DESERIALIZATION", False),
            log_level=os.getenv("RUN_ITEMS_LOG_LEVEL", "WARNING").upper(),
        )


def configure_logging(settings: RunItemSettings) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger and return it."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{settings.log_level}', using WARNING")
        level = logging.WARNING
    package_logger.setLevel(level)
    return package_logger
