"""Tests for logging configuration helpers."""

import json
import logging

from recipebasket.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    clear_context,
    list_key_ctx,
    request_id_ctx,
    set_context,
)


def _record(message: str = "saved list") -> logging.LogRecord:
    return logging.LogRecord(
        name="recipebasket.shopping.store",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    """Tests for LoggingContext context manager."""

    def test_sets_and_resets(self):
        """Test that values are restored on exit."""
        with LoggingContext(request_id="req-1", list_key="bb-shopping-list"):
            assert request_id_ctx.get() == "req-1"
            assert list_key_ctx.get() == "bb-shopping-list"

        assert request_id_ctx.get() is None
        assert list_key_ctx.get() is None

    def test_set_and_clear(self):
        """Test set_context and clear_context."""
        set_context(list_key="weekly")
        assert list_key_ctx.get() == "weekly"
        clear_context()
        assert list_key_ctx.get() is None


class TestFormatters:
    """Tests for log formatters."""

    def test_json_includes_context(self):
        """Test that JSON output carries context variables."""
        with LoggingContext(list_key="bb-shopping-list"):
            data = json.loads(StructuredJsonFormatter().format(_record()))

        assert data["message"] == "saved list"
        assert data["level"] == "WARNING"
        assert data["list_key"] == "bb-shopping-list"
        assert "request_id" not in data

    def test_contextual_includes_context(self):
        """Test the human-readable format."""
        with LoggingContext(request_id="abcdef123456", list_key="weekly"):
            line = ContextualFormatter().format(_record())

        assert "[req=abcdef12, list=weekly]" in line
        assert line.endswith("| saved list")
