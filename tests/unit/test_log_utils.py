"""
Unit tests for logging helpers and correlation IDs.
"""

import logging
from uuid import uuid4

from blogger.boundary.db.models import PostModel
from blogger.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from blogger.observability.log_utils import (
    REDACTED,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from blogger.observability.logger import CorrelationIdFilter


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_none(self):
        assert safe_log_value(None) == "None"

    def test_uuid(self):
        value = uuid4()
        assert safe_log_value(value) == str(value)

    def test_collections_are_summarised(self):
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_orm_rows_render_as_class_and_id(self):
        post_id = uuid4()
        post = PostModel(id=post_id, text="long body")
        assert safe_log_value(post) == f"PostModel({post_id})"

    def test_long_strings_are_truncated(self):
        result = safe_log_value("x" * 300, max_length=10)
        assert result.startswith("x" * 10)
        assert "truncated, 300 total" in result


class TestLogWithContext:
    """Test suite for log_with_context and log_exception_with_context."""

    def test_sensitive_keys_are_redacted(self, caplog):
        logger = logging.getLogger("tests.log_utils")
        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "signup", email="a@example.com", password="pw")

        record = caplog.records[-1]
        assert record.email == "a@example.com"
        assert record.password == REDACTED

    def test_exception_context(self, caplog):
        logger = logging.getLogger("tests.log_utils")
        with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
            try:
                raise RuntimeError("boom")
            except RuntimeError as e:
                log_exception_with_context(logger, "failed", e, handler="create_post")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.handler == "create_post"
        assert record.exc_info is not None


class TestCorrelation:
    """Test suite for correlation ID context helpers."""

    def test_set_generates_id_when_missing(self):
        value = set_correlation_id()
        try:
            assert value
            assert get_correlation_id() == value
        finally:
            clear_correlation_id()

    def test_set_keeps_given_id(self):
        set_correlation_id("req-1")
        try:
            assert get_correlation_id() == "req-1"
        finally:
            clear_correlation_id()
        assert get_correlation_id() == ""

    def test_filter_injects_id(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        assert CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"
