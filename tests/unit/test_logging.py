"""
Unit tests for structured logging helpers.
"""

import structlog

from shared.logging import bind_context, censor_sensitive, clear_context
from shared.logging.logger import REDACTED


class TestCensorSensitive:
    """Tests for the redaction processor."""

    def test_top_level_keys(self) -> None:
        """Test that credentials are redacted and other keys kept."""
        event = censor_sensitive(None, "info", {  # type: ignore[arg-type]
            "event": "login_attempt",
            "password": "hunter2",
            "Authorization": "Bearer abc",
            "user_id": "u1",
        })

        assert event["password"] == REDACTED
        assert event["Authorization"] == REDACTED
        assert event["user_id"] == "u1"
        assert event["event"] == "login_attempt"

    def test_nested_records(self) -> None:
        """Test that identity numbers inside submitted records are redacted."""
        event = censor_sensitive(None, "info", {  # type: ignore[arg-type]
            "event": "submission",
            "records": [{"name": "Lerato", "id_number": "8001015009087"}],
        })

        assert event["records"][0]["id_number"] == REDACTED
        assert event["records"][0]["name"] == "Lerato"


class TestContextBinding:
    """Tests for context variable binding."""

    def test_bind_and_clear(self) -> None:
        """Test that bound context is visible until cleared."""
        bind_context(user_id="u1")
        assert structlog.contextvars.get_contextvars()["user_id"] == "u1"

        clear_context()
        assert "user_id" not in structlog.contextvars.get_contextvars()
