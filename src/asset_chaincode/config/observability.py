"""Observability configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilityConfig(BaseSettings):
    """Logging and metrics settings.

    Attributes:
        log_level (str): Minimum log level, upper-cased on validation.
        log_format (str): Console log format ("json", "pretty" or "compact").
        log_file (str | None): Optional path of a JSON-lines log file.
        metrics_enabled (bool): Whether the host records Prometheus metrics.
        metrics_namespace (str): Prefix of every metric name.
    """

    model_config = SettingsConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="pretty", description="Console log format (json, pretty or compact)")
    log_file: str | None = Field(default=None, description="Optional JSON-lines log file path")
    metrics_enabled: bool = Field(default=True, description="Record Prometheus invocation metrics")
    metrics_namespace: str = Field(default="asset_chaincode", description="Namespace prefix for metric names")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validates and upper-cases the `log_level` field.

        Raises:
            ValueError: If the log level is not one of the allowed values.
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validates the `log_format` field.

        Raises:
            ValueError: If the log format is not one of the allowed values.
        """
        allowed = {"json", "pretty", "compact"}
        v = v.lower()
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v
