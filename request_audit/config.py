"""Environment-driven configuration for the request audit tools."""

import logging
import os
from datetime import timedelta
from typing import Any, Dict, Final

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_SLOW_MS: Final[str] = "1000"

logger = logging.getLogger(__name__)


def get_config() -> Dict[str, Any]:
    """Read settings from the environment, loading a .env file if present."""
    load_dotenv()

    level_name = os.environ.get("REQUEST_AUDIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"REQUEST_AUDIT_LOG_LEVEL has unknown level: {level_name}")

    raw_slow_ms = os.environ.get("REQUEST_AUDIT_SLOW_MS", DEFAULT_SLOW_MS)
    try:
        slow_ms = float(raw_slow_ms)
    except ValueError:
        raise ValueError(f"REQUEST_AUDIT_SLOW_MS must be a number, got: {raw_slow_ms!r}")
    if slow_ms < 0:
        raise ValueError(f"REQUEST_AUDIT_SLOW_MS must not be negative, got: {slow_ms}")

    try:
        slow_threshold = timedelta(milliseconds=slow_ms)
    except (OverflowError, ValueError):
        raise ValueError(f"REQUEST_AUDIT_SLOW_MS is out of range, got: {raw_slow_ms!r}")

    logger.debug(f"Loaded config: log_level={level_name}, slow_ms={slow_ms}")
    return {
        "log_level": log_level,
        "slow_threshold": slow_threshold,
    }
