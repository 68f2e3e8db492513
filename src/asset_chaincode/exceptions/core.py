"""Exception definitions for asset_chaincode.

This module defines the base exception class `CoreError` and the error
taxonomy of the chaincode: dispatch errors, argument errors, state-transition
errors and store errors. Operations raise these; the dispatcher turns them
into error responses.
"""

import sys
import traceback
from types import TracebackType
from typing import Any

from asset_chaincode.observability.trace_id import get_formatted_trace_id


class CoreError(Exception):
    """Base exception for all asset_chaincode errors.

    It provides standardized fields for error messages, error codes, and detailed information,
    including an automatically captured or provided trace ID for easier debugging and logging.

    Attributes:
        message (str): A human-readable error message. This is what ends up in an error response.
        error_code (str): A standardized code for the error, defaulting to the class name.
        details (dict[str, Any]): A dictionary for additional, context-specific error details.
        trace_id (str): The trace ID active when the error was raised.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        trace_id: str | None = None,
    ) -> None:
        """Initializes a new instance of the `CoreError` exception.

        Args:
            message (str): A human-readable description of the error.
            error_code (str | None): An optional, standardized code for the error.
                                     If `None`, the class name of the exception will be used.
            details (dict[str, Any] | None): An optional dictionary containing additional, context-specific
                                            details about the error.
            trace_id (str | None): An optional trace ID to associate with this error.
                                   If `None`, the currently active trace ID is captured.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

        # Automatically capture trace ID
        self.trace_id = trace_id if trace_id is not None else get_formatted_trace_id()
        self.details["trace_id"] = self.trace_id

    def __str__(self) -> str:
        """Returns a log-friendly string representation of the error.

        The trace ID comes first, followed by the error code (if different
        from the class name), the message and any additional details.
        """
        parts = []

        if self.trace_id and self.trace_id != "no-trace":
            parts.append(f"[{self.trace_id}]")

        if self.error_code != self.__class__.__name__:
            parts.append(f"[{self.error_code}]")

        parts.append(self.message)

        details_to_show = {k: v for k, v in self.details.items() if k != "trace_id"}
        if details_to_show:
            parts.append(f"Details: {details_to_show}")

        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"trace_id='{self.trace_id}', "
            f"details={self.details}"
            f")"
        )


class ConfigurationError(CoreError):
    """Raised when the application settings are missing or invalid."""

    pass


class UnknownOperationError(CoreError):
    """Raised when an invocation names a function the chaincode does not expose.

    Attributes:
        function (str): The unrecognized function name.
    """

    def __init__(self, message: str, *, function: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.function = function
        self.details["function"] = function


class MissingArgumentError(CoreError):
    """Raised when an invocation carries fewer arguments than the operation needs.

    Attributes:
        function (str | None): The operation that was invoked.
        expected (int | None): The number of arguments the operation needs.
        received (int | None): The number of arguments actually supplied.
    """

    def __init__(
        self,
        message: str,
        *,
        function: str | None = None,
        expected: int | None = None,
        received: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.function = function
        self.expected = expected
        self.received = received
        if function:
            self.details["function"] = function
        if expected is not None:
            self.details["expected"] = expected
        if received is not None:
            self.details["received"] = received


class ValidationError(CoreError):
    """Raised when input data does not conform to expected rules or constraints."""

    pass


class ArgumentParseError(ValidationError):
    """Raised when an argument or payload value cannot be interpreted.

    Examples are an empty asset key or a malformed boolean payload.

    Attributes:
        field_name (str | None): The name of the offending argument.
        field_value (Any | None): The value that could not be interpreted.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        field_value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.field_value = field_value
        if field_name:
            self.details["field_name"] = field_name
        if field_value is not None:
            self.details["field_value"] = str(field_value)


class AssetStateError(CoreError):
    """Base exception for invalid state transitions on an asset.

    Attributes:
        key (str): The key of the asset the transition was attempted on.
    """

    def __init__(self, message: str, *, key: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        self.details["key"] = key


class AlreadyExistsError(AssetStateError):
    """Raised when creating an asset whose key is already present in the store."""

    pass


class NotFoundError(AssetStateError):
    """Raised when reading, updating or deleting an asset whose key is absent."""

    pass


class StoreError(CoreError):
    """Base exception for state store failures.

    A store error means the backend itself failed; it is never used to signal
    that a key is absent.

    Attributes:
        key (str | None): The key involved in the failed store call.
        cause (str | None): The backend's own error text.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        cause: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        self.cause = cause
        if key is not None:
            self.details["key"] = key
        if cause is not None:
            self.details["cause"] = cause


class StoreReadError(StoreError):
    """Raised when reading a key from the store fails."""

    pass


class StoreWriteError(StoreError):
    """Raised when writing a key to the store fails."""

    pass


class StoreDeleteError(StoreError):
    """Raised when deleting a key from the store fails."""

    pass


class SerializationError(CoreError):
    """Raised when an asset record cannot be serialized or deserialized.

    Attributes:
        key (str | None): The key of the asset whose record failed to (de)serialize.
    """

    def __init__(self, message: str, *, key: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        if key is not None:
            self.details["key"] = key


class InvocationError(CoreError):
    """Raised by `AssetClient` when an invocation returns an error response.

    Attributes:
        function (str): The invoked function name.
        status (int): The status code of the error response.
    """

    def __init__(self, message: str, *, function: str, status: int, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.function = function
        self.status = status
        self.details["function"] = function
        self.details["status"] = status


class TraceIdExceptionHandler:
    """A global exception hook that tags uncaught exceptions with the trace ID.

    `CoreError` instances already carry their trace ID; any other exception
    gets the active trace ID prepended to its message before the original
    hook prints it.
    """

    def __init__(self) -> None:
        self._original_handler: Any = None

    def install(self) -> None:
        """Installs this handler as `sys.excepthook`."""
        if sys.excepthook == self._handle_exception:
            return
        self._original_handler = sys.excepthook
        sys.excepthook = self._handle_exception

    def uninstall(self) -> None:
        """Restores the hook that was active before `install`."""
        if self._original_handler:
            # Only restore if we are the current handler
            if sys.excepthook == self._handle_exception:
                sys.excepthook = self._original_handler
            self._original_handler = None

    def _handle_exception(
        self, exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None
    ) -> None:
        enhanced_exc = enhance_exception_with_trace_id(exc_value)

        if self._original_handler:
            self._original_handler(exc_type, enhanced_exc, exc_traceback)
        else:
            traceback.print_exception(exc_type, enhanced_exc, exc_traceback)


def enhance_exception_with_trace_id(exc: BaseException) -> BaseException:
    """Prepends the active trace ID to a non-`CoreError` exception's message.

    Args:
        exc: The exception instance to enhance.

    Returns:
        The same exception instance.
    """
    if isinstance(exc, CoreError):
        return exc

    trace_id = get_formatted_trace_id()
    if trace_id != "no-trace":
        current_message = str(exc)
        if not current_message.startswith(f"[{trace_id}]"):
            exc.args = (f"[{trace_id}] {current_message}",) + exc.args[1:]

    return exc


# Global instance for easy access
_global_exception_handler = TraceIdExceptionHandler()


def install_global_exception_handler() -> None:
    """Installs the global trace ID exception hook."""
    _global_exception_handler.install()


def uninstall_global_exception_handler() -> None:
    """Uninstall global exception handler."""
    _global_exception_handler.uninstall()
