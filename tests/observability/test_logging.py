"""Tests for correlation ID tracking and logging configuration."""

import logging

import pytest

from tutorschool.observability import configure_logging, get_correlation_id, set_correlation_id
from tutorschool.observability.correlation import clear_correlation_id
from tutorschool.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def reset_correlation_id():
    yield
    clear_correlation_id()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCorrelationId:
    """Tests for correlation ID context helpers."""

    def test_set_uses_given_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

    def test_set_generates_id_when_missing(self) -> None:
        generated = set_correlation_id()

        assert generated
        assert get_correlation_id() == generated

    def test_clear_resets_to_empty(self) -> None:
        set_correlation_id("req-1")
        clear_correlation_id()

        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Tests for CorrelationIdFilter."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

    def test_filter_attaches_active_id(self) -> None:
        set_correlation_id("req-7")
        record = self._record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-7"

    def test_filter_uses_dash_outside_request(self) -> None:
        record = self._record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configure_logging_installs_single_handler(self, restore_root_logger) -> None:
        configure_logging("debug")
        configure_logging("warning")

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
