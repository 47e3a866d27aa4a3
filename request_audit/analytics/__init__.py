"""Analytics over request audit log entries."""

from .statistics import RequestLogStatistics

__all__ = ["RequestLogStatistics"]
