"""Tests for logging configuration and resolution logging."""

import io
import json
import sys
from unittest.mock import Mock

import structlog

from slcsp_app.logging.config import (
    configure_logging,
    get_logger,
    get_resolution_logger,
    log_resolution,
)


class TestLoggingConfig:
    """Test structlog configuration."""

    def teardown_method(self):
        """Restore the stderr configuration used by the rest of the suite."""
        structlog.reset_defaults()
        configure_logging(level="WARNING", stream=sys.stderr)

    def test_json_output_to_stream(self):
        """Test that JSON logs go to the configured stream."""
        stream = io.StringIO()
        configure_logging(level="INFO", format_json=True, stream=stream)

        get_logger("test.logging").info("Source loaded", rows=3)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "Source loaded"
        assert record["rows"] == 3
        assert record["level"] == "info"

    def test_level_filtering(self):
        """Test that records below the level are dropped."""
        stream = io.StringIO()
        configure_logging(level="WARNING", format_json=True, stream=stream)

        get_logger("test.filtering").info("hidden")

        assert stream.getvalue() == ""

    def test_resolution_logger_binding(self):
        """Test that the resolution logger carries its subsystem."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", format_json=True, stream=stream)

        get_resolution_logger("test.resolution").debug("ZIP resolved")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["subsystem"] == "resolution"
        assert record["audit_trail"] is True


class TestLogResolution:
    """Test resolution decision logging."""

    def test_log_resolution_fields(self):
        """Test that a resolution is logged with its outcome and rate."""
        logger = Mock()
        bound = logger.bind.return_value

        log_resolution(logger, zip_code="64148", outcome="resolved", rating_area="MO3", rate="245.20")

        logger.bind.assert_called_once_with(
            zip_code="64148", outcome="resolved", rating_area="MO3", rate="245.20"
        )
        bound.debug.assert_called_once_with("ZIP resolved")

    def test_log_resolution_context(self):
        """Test that extra context is bound when given."""
        logger = Mock()
        bound = logger.bind.return_value

        log_resolution(logger, zip_code="31210", outcome="ambiguous_zip",
                       context={"candidate_areas": ["GA7", "GA8"]})

        bound.bind.assert_called_once_with(context={"candidate_areas": ["GA7", "GA8"]})
        bound.bind.return_value.debug.assert_called_once_with("ZIP resolved")
