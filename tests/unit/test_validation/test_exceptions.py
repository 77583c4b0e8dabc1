"""
Unit tests for the error types and the log-then-reraise helper.
"""

import logging

import pytest

from procmetrics.validation import (
    ErrorSeverity,
    InstrumentationError,
    handle_config_error,
    handle_error,
)


@pytest.mark.unit
class TestHandleError:
    """Test cases for handle_error."""

    def test_logs_and_reraises(self, caplog):
        error = InstrumentationError("bad stat", path="/proc/1/stat")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(InstrumentationError) as exc_info:
                handle_error(error, "collecting samples")

        assert exc_info.value is error
        assert caplog.records[-1].levelno == logging.ERROR
        assert caplog.records[-1].getMessage() == "Error in collecting samples: bad stat"
        assert caplog.records[-1].exc_info is None

    def test_no_reraise(self, caplog):
        with caplog.at_level(logging.ERROR):
            handle_error(ValueError("boom"), "parsing", reraise=False)

        assert "Error in parsing: boom" in caplog.text

    def test_critical_logs_traceback(self, caplog):
        with caplog.at_level(logging.ERROR):
            try:
                raise ValueError("boom")
            except ValueError as e:
                handle_error(e, "loading", severity=ErrorSeverity.CRITICAL, reraise=False)

        record = caplog.records[-1]
        assert record.levelno == logging.CRITICAL
        assert record.exc_info[0] is ValueError

    def test_uses_given_logger(self, caplog):
        custom = logging.getLogger("procmetrics.tests.custom")

        with caplog.at_level(logging.ERROR):
            handle_error(ValueError("boom"), "x", reraise=False, logger=custom)

        assert caplog.records[-1].name == "procmetrics.tests.custom"

    def test_config_context_prefix(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(KeyError):
                handle_config_error(KeyError("pid"), "loading exporter configuration")

        assert "Error in config loading exporter configuration" in caplog.text


@pytest.mark.unit
class TestInstrumentationError:
    """Test cases for InstrumentationError."""

    def test_path_is_stringified(self, temp_dir):
        error = InstrumentationError("missing", path=temp_dir / "stat")

        assert error.path == str(temp_dir / "stat")
        assert str(error) == "missing"

    def test_path_optional(self):
        assert InstrumentationError("no tick rate").path is None
