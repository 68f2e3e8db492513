"""Trace ID management for invocation correlation.

Every chaincode invocation runs under a trace ID, normally the ledger
transaction ID, so that all log lines and errors produced while serving one
invocation can be correlated. The ID is kept in a `contextvars.ContextVar`
and scoped with `TraceContext`.
"""

import contextvars
import uuid
from typing import Any

# Context variable to store the current trace ID
trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar("trace_id", default=None)


def generate_trace_id() -> str:
    """Generates a new, unique trace ID.

    The generated ID is a UUID4 string with hyphens removed for a more compact representation.

    Returns:
        A new, unique trace ID string.
    """
    return uuid.uuid4().hex


def set_trace_id(trace_id: str | None = None) -> str:
    """Sets the current trace ID, generating one when `trace_id` is `None`.

    Returns:
        The trace ID that was set.
    """
    if trace_id is None:
        trace_id = generate_trace_id()

    trace_id_context.set(trace_id)
    return trace_id


def get_trace_id() -> str | None:
    """Returns the current trace ID, or `None` outside of any trace."""
    return trace_id_context.get()


def clear_trace_id() -> None:
    """Clears the current trace ID."""
    trace_id_context.set(None)


def get_formatted_trace_id() -> str:
    """Retrieves the current trace ID formatted for display.

    Returns:
        The current trace ID, or "no-trace" if none is set.
    """
    trace_id = get_trace_id()
    return trace_id if trace_id else "no-trace"


class TraceContext:
    """A context manager scoping a trace ID to a block.

    On exit the previously active trace ID (if any) is restored, so nested
    invocations never leak their IDs to the caller.
    """

    def __init__(self, trace_id: str | None = None):
        """Initializes the TraceContext.

        Args:
            trace_id: Optional. The trace ID to set for this context. If `None`,
                      a new unique trace ID will be generated.
        """
        self.trace_id = trace_id
        self.token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> str:
        if self.trace_id is None:
            self.trace_id = generate_trace_id()

        self.token = trace_id_context.set(self.trace_id)
        return self.trace_id

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        if self.token is not None:
            trace_id_context.reset(self.token)
            self.token = None
