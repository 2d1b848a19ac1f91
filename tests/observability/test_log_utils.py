"""
Test suite for structured logging helpers.

System role: Verification of logging utilities
"""

import logging

import pytest

from college_directory.models.hierarchy import Gender, Student
from college_directory.observability.correlation import clear_correlation_id, set_correlation_id
from college_directory.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from college_directory.observability.logger import CorrelationIdFilter, configure_logging


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_none(self) -> None:
        assert safe_log_value(None) == "None"

    def test_collections_should_be_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_records_should_log_class_and_id(self) -> None:
        student = Student(id=7, name="Ana", age=20, gender=Gender.FEMALE, grade="A")

        assert safe_log_value(student) == "Student(id=7)"

    def test_long_strings_should_be_truncated(self) -> None:
        value = safe_log_value("x" * 300, max_length=10)

        assert value.startswith("xxxxxxxxxx... (truncated")
        assert value.endswith("300 total)")


class TestLogWithContext:
    """Test suite for log_with_context and log_exception_with_context."""

    def test_should_attach_safe_extra(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "Loaded", college_count=3, ids=[1, 2])

        record = caplog.records[0]
        assert record.college_count == "3"
        assert record.ids == "list(2 items)"

    def test_should_include_request_id_when_set(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")
        set_correlation_id("req-9")

        try:
            with caplog.at_level(logging.INFO, logger="tests.log_utils"):
                log_with_context(logger, logging.INFO, "Loaded")
        finally:
            clear_correlation_id()

        assert caplog.records[0].request_id == "req-9"

    def test_exception_should_carry_error_fields(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
            log_exception_with_context(logger, "Failed", ValueError("bad"), path="x.json")

        record = caplog.records[0]
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad"
        assert record.exc_info is not None


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_should_install_single_handler_with_filter(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            configure_logging("DEBUG")
            configure_logging("WARNING")

            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
            assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)

    def test_unknown_level_should_raise_and_keep_handlers(self) -> None:
        root = logging.getLogger()
        saved_handlers = root.handlers[:]

        with pytest.raises(ValueError):
            configure_logging("basic_format")

        assert root.handlers == saved_handlers

    def test_filter_should_default_to_dash(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "-"
