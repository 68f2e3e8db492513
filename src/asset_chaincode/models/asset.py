"""Asset model definition.

`MyAsset` is the only entity the chaincode manages. Its key is the store
address and is never part of the record; the record is a compact JSON object
holding just the value, e.g. `{"value":"value1"}`.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from asset_chaincode.exceptions import SerializationError


class MyAsset(BaseModel):
    """A single string value stored under a single string key.

    Attributes:
        value (str): The asset payload. Replaced wholesale by an update.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )

    value: str = Field(..., description="Asset value")

    def to_bytes(self, key: str | None = None) -> bytes:
        """Serializes the asset into its stored record.

        Args:
            key: The key the record is written under, used only for error reporting.

        Raises:
            SerializationError: If the asset cannot be serialized.
        """
        try:
            return self.model_dump_json().encode("utf-8")
        except (ValueError, TypeError) as e:
            raise SerializationError(
                f"Failed to marshal asset with key '{key}', error = {e}",
                key=key,
            ) from e

    @classmethod
    def from_bytes(cls, data: bytes, key: str | None = None) -> "MyAsset":
        """Deserializes a stored record.

        Fields other than `value` are ignored.

        Raises:
            SerializationError: If the record is not a JSON object with a string `value`.
        """
        try:
            return cls.model_validate_json(data)
        except PydanticValidationError as e:
            raise SerializationError(
                f"Failed to unmarshal asset with key '{key}', error = {e.errors()[0]['msg']}",
                key=key,
            ) from e
