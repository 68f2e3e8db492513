"""Asset chaincode exceptions package.

All exceptions inherit from CoreError which provides structured error handling
with error codes, messages, trace IDs and additional details.
"""

from .core import (
    AlreadyExistsError,
    ArgumentParseError,
    AssetStateError,
    ConfigurationError,
    CoreError,
    InvocationError,
    MissingArgumentError,
    NotFoundError,
    SerializationError,
    StoreDeleteError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    TraceIdExceptionHandler,
    UnknownOperationError,
    ValidationError,
    enhance_exception_with_trace_id,
    install_global_exception_handler,
    uninstall_global_exception_handler,
)

__all__ = [
    # Core exception classes
    "CoreError",
    "ConfigurationError",
    "UnknownOperationError",
    "MissingArgumentError",
    "ValidationError",
    "ArgumentParseError",
    "AssetStateError",
    "AlreadyExistsError",
    "NotFoundError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "StoreDeleteError",
    "SerializationError",
    "InvocationError",
    # Trace ID enhanced exception utilities
    "enhance_exception_with_trace_id",
    "TraceIdExceptionHandler",
    "install_global_exception_handler",
    "uninstall_global_exception_handler",
]
