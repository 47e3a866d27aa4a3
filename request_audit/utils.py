"""Utility functions for displaying request audit log entries."""

import logging
from datetime import timedelta
from typing import Optional

from .config import get_config
from .models import RequestLog

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the request audit tools.

    Args:
        level: Logging level for the root logger (defaults to REQUEST_AUDIT_LOG_LEVEL)
        log_file: Optional path of a file that receives a copy of the log
    """
    if level is None:
        level = get_config()["log_level"]

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    logger.debug(f"Logging configured (level={logging.getLevelName(level)}, file={log_file})")


def format_latency(latency: timedelta) -> str:
    """Render a latency as milliseconds, or seconds once it reaches one second."""
    millis = round(latency.total_seconds() * 1000, 2)
    if abs(millis) >= 1000:
        return f"{millis / 1000:.2f}s"
    return f"{millis:.2f}ms"


def status_class(status: int) -> str:
    """Return the status class of a code, e.g. '2xx' for 204."""
    if 100 <= status <= 599:
        return f"{status // 100}xx"
    return "unknown"


def full_path(entry: RequestLog) -> str:
    if entry.query:
        return f"{entry.path}?{entry.query}"
    return entry.path


def format_request_log(entry: RequestLog) -> str:
    """
    Format an entry as a single access-log style line.

    Args:
        entry: The request log entry

    Returns:
        Line of the form: <created_at> <ip> "<METHOD> <path>" <status> <latency> "<user agent>"
    """
    ip = entry.ip or "-"
    user_agent = entry.user_agent or "-"
    return (
        f'{entry.created_at.isoformat()} {ip} "{entry.method} {full_path(entry)}" '
        f'{entry.status} {format_latency(entry.latency)} "{user_agent}"'
    )
