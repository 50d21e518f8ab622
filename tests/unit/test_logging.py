"""
Tests for the logging module.
"""

import json
import logging

import pytest
import structlog


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_development_mode(self):
        """Test that development mode uses console renderer."""
        from core.logging import configure_logging

        # Should not raise
        configure_logging(json_logs=False, log_level="DEBUG")

    def test_configure_production_mode(self):
        """Test that production mode uses JSON renderer."""
        from core.logging import configure_logging

        # Should not raise
        configure_logging(json_logs=True, log_level="INFO")

    def test_configure_log_level(self):
        """Test that log level is correctly set."""
        from core.logging import configure_logging

        configure_logging(log_level="WARNING")

        assert logging.getLogger().level == logging.WARNING

    def test_reconfigure_replaces_level(self):
        from core.logging import configure_logging

        configure_logging(log_level="ERROR")
        configure_logging(log_level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_from_settings(self):
        """Test that Settings drive the log level."""
        from config.settings import get_settings_for_testing
        from core.logging import configure_logging_from_settings

        configure_logging_from_settings(get_settings_for_testing(log_level="warning", json_logs=True))

        assert logging.getLogger().level == logging.WARNING


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_named_logger(self):
        """Test getting a named logger."""
        from core.logging import get_logger

        logger = get_logger("results.analyzer")

        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "error")

    def test_get_unnamed_logger(self):
        from core.logging import get_logger

        assert get_logger() is not None

    def test_logger_can_log(self):
        """Test that logger can actually log messages."""
        from core.logging import configure_logging, get_logger

        configure_logging(json_logs=False, log_level="DEBUG")
        logger = get_logger("test")

        # Should not raise
        logger.info("Analyzing selections", total_selections=20)
        logger.debug("Tag frequency analysis completed", counts={"style": 3})
        logger.warning("Design not found or has no tags", design_id="design_042")
        logger.error("Failed to analyze selections", error="No selections provided for analysis")


class TestContextBinding:
    """Tests for context binding functions."""

    def test_bind_context(self):
        """Test binding context variables."""
        from core.logging import bind_context, clear_context

        clear_context()
        bind_context(session_id="abc", round_number=3)

        ctx = structlog.contextvars.get_contextvars()
        assert ctx.get("session_id") == "abc"
        assert ctx.get("round_number") == 3

        clear_context()

    def test_clear_context(self):
        from core.logging import bind_context, clear_context

        bind_context(session_id="abc")
        clear_context()

        assert "session_id" not in structlog.contextvars.get_contextvars()

    def test_unbind_specific_context(self):
        """Test unbinding specific context variables."""
        from core.logging import bind_context, clear_context, unbind_context

        clear_context()
        bind_context(session_id="abc", catalog="sample", round_number=1)

        unbind_context("round_number")

        ctx = structlog.contextvars.get_contextvars()
        assert ctx.get("session_id") == "abc"
        assert ctx.get("catalog") == "sample"
        assert "round_number" not in ctx

        clear_context()


class TestLoggerMixin:
    """Tests for LoggerMixin class."""

    def test_mixin_provides_logger(self):
        from core.logging import LoggerMixin

        class Loader(LoggerMixin):
            pass

        assert Loader().logger is not None

    def test_catalog_classes_log(self):
        """Test that catalog classes log through the mixin."""
        from catalog import CatalogLoader, DataValidator
        from core.logging import configure_logging

        configure_logging(json_logs=False)

        # Should not raise
        CatalogLoader().logger.info("Loading design data")
        DataValidator().logger.debug("Catalog validation errors", count=0)


class TestJSONOutput:
    """Tests for JSON logging output."""

    def test_json_output_is_valid_json(self, capsys):
        """Test that JSON output is valid JSON."""
        from core.logging import configure_logging, get_logger

        configure_logging(json_logs=True, log_level="INFO")
        logger = get_logger("json_test")

        logger.info("Selection analysis completed", skipped_selections=0)

        captured = capsys.readouterr()

        if captured.out:
            for line in captured.out.strip().split("\n"):
                if line:
                    data = json.loads(line)
                    assert "event" in data


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
