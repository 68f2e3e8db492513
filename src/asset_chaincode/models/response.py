"""Invocation response model.

Every invocation, successful or not, produces a `Response`. Status codes
follow the ledger shim: 200 for success, 500 for errors, and anything at or
above 400 counts as a failure.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Status(IntEnum):
    """Response status codes.

    Attributes:
        OK (int): The invocation succeeded.
        ERROR_THRESHOLD (int): Lowest status code treated as a failure.
        ERROR (int): The invocation failed.
    """

    OK = 200
    ERROR_THRESHOLD = 400
    ERROR = 500


class Response(BaseModel):
    """Outcome of one chaincode invocation.

    Attributes:
        status (int): The status code, `Status.OK` on success.
        message (str): Human-readable error message, empty on success.
        payload (bytes | None): Optional result bytes.
    """

    model_config = ConfigDict(frozen=True)

    status: int = Field(..., description="Status code")
    message: str = Field(default="", description="Error message")
    payload: bytes | None = Field(default=None, description="Result payload")

    @classmethod
    def success(cls, payload: bytes | None = None) -> "Response":
        """Builds a success response carrying `payload`."""
        return cls(status=Status.OK, payload=payload)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Builds an error response carrying `message` and no payload."""
        return cls(status=Status.ERROR, message=message)

    @property
    def is_ok(self) -> bool:
        """`True` when the status is below the error threshold."""
        return self.status < Status.ERROR_THRESHOLD

    def payload_text(self) -> str | None:
        """Returns the payload decoded as UTF-8, or `None` when there is none."""
        if self.payload is None:
            return None
        return self.payload.decode("utf-8")
