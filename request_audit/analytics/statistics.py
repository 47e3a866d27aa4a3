"""Statistics and analytics for request audit log entries."""

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, List, Optional

import numpy as np
import pandas as pd

from ..config import get_config
from ..models import RequestLog, request_log_to_dict
from ..utils import format_latency, status_class

DATAFRAME_COLUMNS = [
    "id", "method", "path", "query", "status",
    "latency_ms", "ip", "user_agent", "created_at",
]

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class RequestLogStatistics:
    """Generate statistics and insights from request audit log entries."""

    @staticmethod
    def analyze_request_log(
        entries: List[RequestLog],
        slow_threshold: Optional[timedelta] = None
    ) -> Dict[str, Any]:
        """Generate traffic and latency statistics from a list of entries.

        The slow-request threshold defaults to REQUEST_AUDIT_SLOW_MS.
        """
        if not entries:
            return {"error": "No request log entries available"}

        if slow_threshold is None:
            slow_threshold = get_config()["slow_threshold"]

        total = len(entries)
        error_count = len([e for e in entries if e.status >= 400])

        status_classes = Counter(status_class(e.status) for e in entries)
        methods = Counter(e.method or "unknown" for e in entries)
        paths = Counter(e.path for e in entries)
        clients = Counter(e.ip or "unknown" for e in entries)

        latencies_ms = np.array([e.latency.total_seconds() * 1000 for e in entries])
        created = sorted((e.created_at for e in entries), key=_as_utc)

        stats = {
            "total_requests": total,
            "error_count": error_count,
            "error_rate": round(error_count / total * 100, 1),
            "status_class_distribution": dict(sorted(status_classes.items())),
            "method_distribution": dict(methods),
            "top_paths": paths.most_common(10),
            "top_clients": clients.most_common(10),
            "slow_requests": len([e for e in entries if e.latency >= slow_threshold]),
            "latency": {
                "average_ms": round(float(np.mean(latencies_ms)), 2),
                "min_ms": round(float(np.min(latencies_ms)), 2),
                "max_ms": round(float(np.max(latencies_ms)), 2),
                "p50_ms": round(float(np.percentile(latencies_ms, 50)), 2),
                "p95_ms": round(float(np.percentile(latencies_ms, 95)), 2),
                "p99_ms": round(float(np.percentile(latencies_ms, 99)), 2),
            },
            "first_seen": created[0].isoformat(),
            "last_seen": created[-1].isoformat(),
        }

        logger.debug(f"Analyzed {total} request log entries ({error_count} errors)")
        return stats

    @staticmethod
    def generate_summary_report(stats: Dict[str, Any]) -> str:
        """Generate a text summary report from analyze_request_log output."""

        report = []
        report.append("=" * 70)
        report.append("REQUEST AUDIT SUMMARY REPORT")
        report.append("=" * 70)
        report.append("")

        if "error" in stats:
            report.append(f"  • {stats['error']}")
            report.append("")
            report.append("=" * 70)
            return "\n".join(report)

        report.append("TRAFFIC:")
        report.append(f"  • Total Requests: {stats['total_requests']}")
        report.append(f"  • Errors (4xx/5xx): {stats['error_count']}")
        report.append(f"  • Error Rate: {stats['error_rate']:.1f}%")
        report.append(f"  • Slow Requests: {stats['slow_requests']}")
        report.append(f"  • Window: {stats['first_seen']} - {stats['last_seen']}")
        report.append("  • Status Classes:")
        for klass, count in stats['status_class_distribution'].items():
            report.append(f"    - {klass}: {count}")
        report.append("  • Methods:")
        for method, count in stats['method_distribution'].items():
            report.append(f"    - {method}: {count}")
        report.append("")

        latency = stats['latency']
        report.append("LATENCY:")
        report.append(f"  • Average: {format_latency(timedelta(milliseconds=latency['average_ms']))}")
        report.append(f"  • p50: {format_latency(timedelta(milliseconds=latency['p50_ms']))}")
        report.append(f"  • p95: {format_latency(timedelta(milliseconds=latency['p95_ms']))}")
        report.append(f"  • p99: {format_latency(timedelta(milliseconds=latency['p99_ms']))}")
        report.append(
            f"  • Range: {format_latency(timedelta(milliseconds=latency['min_ms']))}"
            f" - {format_latency(timedelta(milliseconds=latency['max_ms']))}"
        )
        report.append("")

        report.append("TOP PATHS:")
        for path, count in stats['top_paths'][:5]:
            report.append(f"  • {path}: {count}")
        report.append("")

        report.append("=" * 70)

        return "\n".join(report)

    @staticmethod
    def to_dataframe(entries: List[RequestLog]) -> pd.DataFrame:
        """Build a table with one row per entry."""
        if not entries:
            return pd.DataFrame(columns=DATAFRAME_COLUMNS)

        df = pd.DataFrame([request_log_to_dict(entry) for entry in entries], columns=DATAFRAME_COLUMNS)
        df["created_at"] = pd.to_datetime([_as_utc(entry.created_at) for entry in entries], utc=True)
        return df
