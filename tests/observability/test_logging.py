"""Tests for correlation scopes, log formatting and log helpers."""

import logging

import pytest

from focusrag.observability.correlation import correlation_scope, get_correlation_id
from focusrag.observability.log_utils import log_exception_with_context, log_with_context, safe_log_value
from focusrag.observability.logger import ContextFormatter, CorrelationIdFilter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("focusrag.test", logging.INFO, __file__, 1, "Search done", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestCorrelationScope:
    """Tests for correlation_scope."""

    def test_binds_and_restores(self) -> None:
        assert get_correlation_id() is None

        with correlation_scope("req-1") as outer:
            assert outer == "req-1"
            with correlation_scope() as inner:
                assert get_correlation_id() == inner != "req-1"
            assert get_correlation_id() == "req-1"

        assert get_correlation_id() is None

    def test_generates_id_for_empty_header(self) -> None:
        with correlation_scope("") as value:
            assert len(value) == 32


class TestFormatting:
    """Tests for the correlation filter and context formatter."""

    def test_filter_uses_dash_outside_scope(self) -> None:
        record = _record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"

    def test_filter_uses_scope_id(self) -> None:
        record = _record()

        with correlation_scope("req-9"):
            CorrelationIdFilter().filter(record)

        assert record.correlation_id == "req-9"

    def test_formatter_appends_sorted_context(self) -> None:
        formatter = ContextFormatter("[%(correlation_id)s] %(message)s")
        record = _record(correlation_id="req-1", stage="reranking", focus_mode="webSearch")

        assert formatter.format(record) == "[req-1] Search done | focus_mode=webSearch stage=reranking"

    def test_formatter_without_context(self) -> None:
        formatter = ContextFormatter("%(message)s")

        assert formatter.format(_record(correlation_id="-")) == "Search done"


class TestLogUtils:
    """Tests for safe structured logging helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            (["a", "b"], "list(2 items)"),
            ({"k": 1}, "dict(1 keys)"),
            (0.5, "0.5"),
            ("short", "short"),
        ],
    )
    def test_safe_log_value(self, value, expected) -> None:
        assert safe_log_value(value) == expected

    def test_long_strings_are_cut(self) -> None:
        assert safe_log_value("x" * 250) == "x" * 200 + "... (250 chars)"

    def test_log_with_context_attaches_fields(self, caplog) -> None:
        logger = logging.getLogger("focusrag.test.context")

        with caplog.at_level(logging.INFO, logger="focusrag.test.context"):
            log_with_context(logger, logging.INFO, "Starting search stream", focus_mode="webSearch", documents=[1, 2])

        record = caplog.records[0]
        assert record.focus_mode == "webSearch"
        assert record.documents == "list(2 items)"

    def test_log_exception_with_context(self, caplog) -> None:
        logger = logging.getLogger("focusrag.test.exception")

        with caplog.at_level(logging.ERROR, logger="focusrag.test.exception"):
            log_exception_with_context(logger, "Pipeline failed", ValueError("bad vector"), stage="reranking")

        record = caplog.records[0]
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad vector"
        assert record.stage == "reranking"
