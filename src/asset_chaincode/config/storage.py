"""State store configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """Settings selecting the state store used by the local host.

    Attributes:
        state_backend (str): "memory" for a throwaway in-process store, "file" for a JSON file.
        state_file (str): Path of the JSON state file used by the "file" backend.
    """

    model_config = SettingsConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
    )

    state_backend: str = Field(default="file", description="State store backend (memory or file)")
    state_file: str = Field(default="data/ledger.json", description="JSON state file path", min_length=1)

    @field_validator("state_backend")
    @classmethod
    def validate_state_backend(cls, v: str) -> str:
        """Validates the `state_backend` field.

        Raises:
            ValueError: If the backend is not "memory" or "file".
        """
        allowed = {"memory", "file"}
        v = v.lower()
        if v not in allowed:
            raise ValueError(f"state_backend must be one of {allowed}")
        return v
