"""Request audit log entries and caller-side helpers."""

from .models import RequestLog

__all__ = ["RequestLog"]
