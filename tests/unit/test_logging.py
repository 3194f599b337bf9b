"""Tests for structured logging helpers."""

from unittest.mock import Mock

import structlog

from stockgrid.logging.config import (
    configure_logging,
    get_fetch_logger,
    get_logger,
    log_fetch_attempt,
    log_layout_decision,
)


def bindable_mock() -> Mock:
    """Mock logger whose bind() returns itself and records bound context."""
    logger = Mock()
    logger.bound = {}

    def bind(**kwargs):
        logger.bound.update(kwargs)
        return logger

    logger.bind.side_effect = bind
    return logger


class TestLoggingConfig:
    """Test suite for logger configuration."""

    def test_configure_and_get_logger(self) -> None:
        configure_logging(level="DEBUG", format_json=True)
        assert get_logger(__name__) is not None
        assert structlog.is_configured()

    def test_fetch_logger_binds_subsystem(self) -> None:
        with structlog.testing.capture_logs() as captured:
            get_fetch_logger(__name__).warning("chart skipped")

        assert captured[0]["subsystem"] == "fetch"
        assert captured[0]["event"] == "chart skipped"


class TestLogHelpers:
    """Test suite for structured log helpers."""

    def test_failed_attempt_logged_as_warning(self) -> None:
        logger = bindable_mock()

        log_fetch_attempt(logger, "TSLA", 2, 3, False, reason="DecodeFailure: bad bytes")

        logger.warning.assert_called_once_with("Fetch attempt failed")
        assert logger.bound["symbol"] == "TSLA"
        assert logger.bound["attempt"] == 2
        assert logger.bound["max_attempts"] == 3
        assert logger.bound["attempt_result"] == "FAIL"
        assert logger.bound["reason"] == "DecodeFailure: bad bytes"

    def test_successful_attempt_logged_at_debug(self) -> None:
        logger = bindable_mock()

        log_fetch_attempt(logger, "TSLA", 1, 3, True)

        logger.debug.assert_called_once_with("Fetch attempt succeeded")
        logger.warning.assert_not_called()
        assert "reason" not in logger.bound

    def test_layout_decision_verbose_in_debug_mode(self) -> None:
        logger = bindable_mock()

        log_layout_decision(logger, 2, 3, 110, 76, 338, 158, verbose=True)

        logger.info.assert_called_once_with("Grid layout planned")
        assert logger.bound["layout"] == "2x3"
        assert logger.bound["cell_size"] == "110x76"
        assert logger.bound["canvas_size"] == "338x158"

    def test_layout_decision_quiet_by_default(self) -> None:
        logger = bindable_mock()

        log_layout_decision(logger, 1, 1, 334, 154, 338, 158)

        logger.debug.assert_called_once_with("Grid layout planned")
        logger.info.assert_not_called()
