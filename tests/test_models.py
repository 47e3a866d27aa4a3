"""Unit tests for the models module."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

from request_audit.models import RequestLog, request_log_from_dict, request_log_to_dict


class TestRequestLog:
    """Test cases for RequestLog model."""

    def setup_method(self):
        """Set up test fixtures."""
        self.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.log = RequestLog(
            id="a1",
            method="GET",
            path="/users",
            query="id=5",
            status=200,
            latency=timedelta(milliseconds=12),
            ip="127.0.0.1",
            user_agent="curl/8.0",
            created_at=self.created_at,
        )

    def test_fields_read_back(self):
        """Test every field reads back exactly the assigned value."""
        assert self.log.id == "a1"
        assert self.log.method == "GET"
        assert self.log.path == "/users"
        assert self.log.query == "id=5"
        assert self.log.status == 200
        assert self.log.latency == timedelta(milliseconds=12)
        assert self.log.ip == "127.0.0.1"
        assert self.log.user_agent == "curl/8.0"
        assert self.log.created_at == datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    def test_no_coercion(self):
        """Test values are stored as given, without validation."""
        created_at = datetime(2024, 1, 1, 12, 30, 15, 123456)
        log = RequestLog(status=999, latency=timedelta(seconds=-1), created_at=created_at)

        assert log.status == 999
        assert log.latency == timedelta(seconds=-1)
        assert log.created_at is created_at
        assert log.created_at.microsecond == 123456

    def test_zero_value_construction(self):
        """Test default construction does not raise."""
        log = RequestLog()

        assert log.id == ""
        assert log.method == ""
        assert log.path == ""
        assert log.query == ""
        assert log.status == 0
        assert log.latency == timedelta(0)
        assert log.ip == ""
        assert log.user_agent == ""
        assert log.created_at == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_equality(self):
        """Test entries with identical fields are equal and hash alike."""
        other = RequestLog(
            id="a1",
            method="GET",
            path="/users",
            query="id=5",
            status=200,
            latency=timedelta(milliseconds=12),
            ip="127.0.0.1",
            user_agent="curl/8.0",
            created_at=self.created_at,
        )

        assert self.log == other
        assert len({self.log, other}) == 1

    @pytest.mark.parametrize("field,value", [
        ("id", "a2"),
        ("method", "POST"),
        ("path", "/orders"),
        ("query", ""),
        ("status", 500),
        ("latency", timedelta(milliseconds=13)),
        ("ip", "::1"),
        ("user_agent", ""),
        ("created_at", datetime(2024, 1, 2, tzinfo=timezone.utc)),
    ])
    def test_inequality(self, field, value):
        """Test entries differing in one field are not equal."""
        data = {
            "id": self.log.id,
            "method": self.log.method,
            "path": self.log.path,
            "query": self.log.query,
            "status": self.log.status,
            "latency": self.log.latency,
            "ip": self.log.ip,
            "user_agent": self.log.user_agent,
            "created_at": self.log.created_at,
        }
        data[field] = value

        assert RequestLog(**data) != self.log

    def test_frozen(self):
        """Test entries cannot be modified after construction."""
        with pytest.raises(FrozenInstanceError):
            self.log.status = 500

    def test_to_dict(self):
        """Test converting RequestLog to dictionary."""
        log_dict = request_log_to_dict(self.log)

        assert log_dict == {
            "id": "a1",
            "method": "GET",
            "path": "/users",
            "query": "id=5",
            "status": 200,
            "latency_ms": pytest.approx(12.0),
            "ip": "127.0.0.1",
            "user_agent": "curl/8.0",
            "created_at": "2024-01-01T00:00:00+00:00",
        }

    def test_from_dict_restores_entry(self):
        """Test request_log_from_dict is the inverse of request_log_to_dict."""
        assert request_log_from_dict(request_log_to_dict(self.log)) == self.log

    def test_from_dict_zulu_timestamp(self):
        """Test a trailing Z is read as UTC."""
        log = request_log_from_dict({"id": "a1", "created_at": "2024-01-01T00:00:00Z"})

        assert log.created_at == self.created_at

    def test_from_dict_missing_fields(self):
        """Test creating RequestLog from an empty dictionary."""
        assert request_log_from_dict({}) == RequestLog()

    def test_from_dict_invalid_timestamp(self):
        """Test an unparsable timestamp raises ValueError."""
        with pytest.raises(ValueError):
            request_log_from_dict({"created_at": "yesterday"})

    def test_from_dict_inner_z_is_not_rewritten(self):
        """Test only a trailing Z is treated as the UTC designator."""
        with pytest.raises(ValueError):
            request_log_from_dict({"created_at": "2024-01-01T00:00Z:00"})

    def test_mapping_helpers_are_not_methods(self):
        """Test the entry type stays a plain value without conversion methods."""
        assert not hasattr(RequestLog, "to_dict")
        assert not hasattr(RequestLog, "from_dict")
