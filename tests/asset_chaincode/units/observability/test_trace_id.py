"""Unit tests for trace ID management."""

import pytest

from asset_chaincode.observability.trace_id import (
    TraceContext,
    clear_trace_id,
    generate_trace_id,
    get_formatted_trace_id,
    get_trace_id,
    set_trace_id,
)


@pytest.mark.unit
class TestTraceId:
    """Test cases for the trace ID helpers."""

    def test_generate_is_unique_hex(self) -> None:
        first, second = generate_trace_id(), generate_trace_id()

        assert first != second
        assert len(first) == 32
        int(first, 16)

    def test_set_get_clear(self) -> None:
        assert get_trace_id() is None
        assert get_formatted_trace_id() == "no-trace"

        assert set_trace_id("abc") == "abc"
        assert get_trace_id() == "abc"

        clear_trace_id()
        assert get_trace_id() is None

    def test_set_generates_when_missing(self) -> None:
        trace_id = set_trace_id()
        assert get_trace_id() == trace_id

    def test_context_restores_previous(self) -> None:
        set_trace_id("outer")

        with TraceContext("inner") as trace_id:
            assert trace_id == "inner"
            assert get_trace_id() == "inner"

        assert get_trace_id() == "outer"

    def test_context_generates_id(self) -> None:
        with TraceContext() as trace_id:
            assert get_trace_id() == trace_id

        assert get_trace_id() is None
