"""Base configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseCoreSettings(BaseSettings):
    """Base settings shared by every asset_chaincode entry point.

    Attributes:
        app_name (str): The name of the application. Defaults to "asset-chaincode".
        environment (str): The deployment environment ("development", "staging", "production").
        debug (bool): A flag indicating whether debug mode is enabled. Defaults to `False`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="asset-chaincode", description="Application name")
    environment: str = Field(default="development", description="Environment (development, staging, production)")
    debug: bool = Field(default=False, description="Debug mode")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validates and lower-cases the `environment` field.

        Raises:
            ValueError: If the environment value is not one of "development", "staging", or "production".
        """
        v = v.lower()
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v
