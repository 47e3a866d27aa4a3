"""Data models for the request audit log."""

from .request_log import RequestLog, request_log_from_dict, request_log_to_dict

__all__ = [
    "RequestLog",
    "request_log_from_dict",
    "request_log_to_dict",
]
