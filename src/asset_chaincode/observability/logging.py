"""Loguru-based structured logging configuration with trace ID support.

Every record gets the active trace ID (the transaction ID of the invocation
being served) injected under `extra["trace_id"]`. Console output is
human-readable by default; the optional file sink writes one JSON object per
line. Standard-library `logging` records are routed into Loguru.
"""

import json
import logging
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from types import FrameType
from typing import TYPE_CHECKING, Any

from loguru import logger

from .trace_id import get_trace_id

if TYPE_CHECKING:
    from loguru import Logger, Record
else:
    Logger = type(logger)
    Record = dict


class LogFormat(str, Enum):
    """Defines available log output formats.

    Attributes:
        JSON (str): One JSON object per record, suitable for machine parsing.
        PRETTY (str): Colored, human-readable format including the trace ID.
        COMPACT (str): A more concise human-readable format.
    """

    JSON = "json"
    PRETTY = "pretty"
    COMPACT = "compact"


def trace_id_patcher(record: "Record") -> None:
    """Loguru patcher injecting the current trace ID into each record.

    If the record carries an exception with its own `trace_id` attribute
    (every `CoreError` does), that ID is added as `exception_trace_id`.
    """
    record["extra"]["trace_id"] = get_trace_id() or "no-trace"

    exc_info = record.get("exception")
    if exc_info and exc_info.value and exc_info.type:
        exception_trace_id = getattr(exc_info.value, "trace_id", None)
        if exception_trace_id and exception_trace_id != "no-trace":
            record["extra"]["exception_trace_id"] = exception_trace_id


def json_formatter(record: "Record") -> str:
    """Formats a Loguru record into a single-line JSON string.

    Loguru treats the return value of a callable formatter as a format string,
    so the rendered JSON is stashed in `extra` and referenced from there.
    """
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        "message": record["message"],
        "trace_id": record["extra"].get("trace_id", "no-trace"),
    }

    for key, value in record["extra"].items():
        if key not in ("trace_id", "serialized"):
            log_entry[key] = value

    exc_info = record.get("exception")
    if exc_info and exc_info.value and exc_info.type:
        exception_info: dict[str, Any] = {
            "type": exc_info.type.__name__,
            "value": str(exc_info.value),
        }
        for attribute in ("error_code", "details"):
            attribute_value = getattr(exc_info.value, attribute, None)
            if attribute_value is not None:
                exception_info[attribute] = attribute_value
        log_entry["exception"] = exception_info

    record["extra"]["serialized"] = json.dumps(log_entry, ensure_ascii=False, default=str)
    return "{extra[serialized]}\n"


def get_formatter(format_type: LogFormat) -> str | Callable[["Record"], str]:
    """Returns a Loguru format string, or a formatter callable for JSON output."""
    if format_type == LogFormat.PRETTY:
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<yellow>{extra[trace_id]}</yellow> | "
            "<level>{message}</level>"
        )

    if format_type == LogFormat.COMPACT:
        return "<green>{time:HH:mm:ss}</green> | <level>{level[0]}</level> | <level>{message}</level>"

    return json_formatter


class InterceptHandler(logging.Handler):
    """Redirects standard-library logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside of the logging module
        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    level: str = "INFO",
    log_format: LogFormat | str = LogFormat.PRETTY,
    log_file: str | Path | None = None,
    app_name: str | None = None,
    environment: str | None = None,
) -> None:
    """Configures Loguru-based structured logging for the application.

    Args:
        level: The minimum logging level to capture (e.g., "INFO", "DEBUG").
        log_format: The `LogFormat` used for the console sink.
        log_file: If given, records are also written to this file as JSON lines.
        app_name: An optional application name added to every record.
        environment: An optional environment name added to every record.
    """
    logger.remove()

    extra_fields: dict[str, Any] = {}
    if app_name:
        extra_fields["app"] = app_name
    if environment:
        extra_fields["environment"] = environment

    def add_extra_fields(record: "Record") -> bool:
        record["extra"].update(extra_fields)
        return True

    console_formatter = get_formatter(LogFormat(log_format))
    logger.add(
        sys.stderr,
        format=console_formatter,
        level=level,
        colorize=isinstance(console_formatter, str),
        backtrace=True,
        diagnose=False,
        filter=add_extra_fields,
    )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=json_formatter,
            level=level,
            rotation="1 day",
            retention="30 days",
            backtrace=True,
            diagnose=False,
            filter=add_extra_fields,
        )

    logger.configure(patcher=trace_id_patcher)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(_: str, **kwargs: Any) -> "Logger":
    """Retrieves the Loguru logger, optionally with bound extra fields.

    Args:
        _: Placeholder for a name, as Loguru's global logger doesn't require one.
        **kwargs: Extra fields to bind to the logger.
    """
    if kwargs:
        return logger.bind(**kwargs)

    return logger


def log_exception_with_context(exc: Exception, level: str = "ERROR", message: str | None = None, **kwargs: Any) -> None:
    """Logs an exception together with its `CoreError` code and details.

    Args:
        exc: The exception object to log.
        level: The logging level for the exception (e.g., "ERROR", "CRITICAL").
        message: Optional. A custom message; defaults to the exception text.
        **kwargs: Additional extra fields for the log record.
    """
    from asset_chaincode.exceptions import CoreError

    log_message = message or f"Exception occurred: {exc}"

    extra_context = kwargs.copy()
    extra_context["exception_type"] = exc.__class__.__name__

    if isinstance(exc, CoreError):
        extra_context["error_code"] = exc.error_code
        extra_context["exception_trace_id"] = exc.trace_id
        extra_context.update(exc.details)

    logger.bind(**extra_context).log(level, log_message)
