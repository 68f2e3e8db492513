"""Observability package for asset_chaincode."""

from .logging import LogFormat, get_logger, log_exception_with_context, setup_logging
from .metrics import ChaincodeMetrics, PrometheusMetricsRegistry
from .trace_id import (
    TraceContext,
    clear_trace_id,
    generate_trace_id,
    get_formatted_trace_id,
    get_trace_id,
    set_trace_id,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_exception_with_context",
    "LogFormat",
    "ChaincodeMetrics",
    "PrometheusMetricsRegistry",
    "generate_trace_id",
    "set_trace_id",
    "get_trace_id",
    "get_formatted_trace_id",
    "clear_trace_id",
    "TraceContext",
]
