"""Request audit log data model."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class RequestLog:
    """Audit log entry for one HTTP request/response pair."""

    id: str = ""
    method: str = ""
    path: str = ""
    query: str = ""
    status: int = 0
    latency: timedelta = timedelta(0)
    ip: str = ""
    user_agent: str = ""
    created_at: datetime = EPOCH


def request_log_to_dict(entry: RequestLog) -> Dict[str, Any]:
    """Return a plain mapping of an entry, latency in milliseconds."""
    return {
        "id": entry.id,
        "method": entry.method,
        "path": entry.path,
        "query": entry.query,
        "status": entry.status,
        "latency_ms": entry.latency.total_seconds() * 1000,
        "ip": entry.ip,
        "user_agent": entry.user_agent,
        "created_at": entry.created_at.isoformat(),
    }


def _parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def request_log_from_dict(data: Dict[str, Any]) -> RequestLog:
    """Build an entry from a request_log_to_dict mapping; missing keys take zero values."""
    created_at = data.get("created_at")
    return RequestLog(
        id=data.get("id", ""),
        method=data.get("method", ""),
        path=data.get("path", ""),
        query=data.get("query", ""),
        status=data.get("status", 0),
        latency=timedelta(milliseconds=data.get("latency_ms", 0)),
        ip=data.get("ip", ""),
        user_agent=data.get("user_agent", ""),
        created_at=_parse_timestamp(created_at) if created_at else EPOCH,
    )
