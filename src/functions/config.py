# =============================================================================
# Configuration
# =============================================================================
# Environment driven settings for the function registry.
#
#   FUNCTIONS_LOG_LEVEL           - log level of the src.functions logger (INFO)
#   FUNCTIONS_JSON_ENSURE_ASCII   - escape non-ASCII in JSON responses (false)
# =============================================================================

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

PACKAGE_LOGGER = "src.functions"


@dataclass
class Settings:
    """Runtime settings, read from the environment."""
    log_level: str = field(default_factory=lambda: os.environ.get("FUNCTIONS_LOG_LEVEL", "INFO").upper())
    json_ensure_ascii: bool = field(
        default_factory=lambda: os.environ.get("FUNCTIONS_JSON_ENSURE_ASCII", "false").lower() == "true"
    )


def load_settings() -> Settings:
    """Create a new Settings instance from the current environment."""
    return Settings()


_global_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global Settings instance."""
    global _global_settings
    if _global_settings is None:
        _global_settings = load_settings()
    return _global_settings


def configure_logging(settings: Settings = None) -> logging.Logger:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        logger.warning(f"Unknown FUNCTIONS_LOG_LEVEL={settings.log_level}, using INFO")
        level = logging.INFO
    logger.setLevel(level)
    return logger
