"""Unified application settings.

`ChaincodeSettings` combines the base, observability and storage settings
into one class read from `CHAINCODE_*` environment variables and `.env`.
"""

from functools import lru_cache

from pydantic_settings import SettingsConfigDict

from .base import BaseCoreSettings
from .observability import ObservabilityConfig
from .storage import StorageConfig


class ChaincodeSettings(BaseCoreSettings, ObservabilityConfig, StorageConfig):
    """All settings of an asset_chaincode process."""

    model_config = SettingsConfigDict(
        env_prefix="CHAINCODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        str_strip_whitespace=True,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> ChaincodeSettings:
    """Returns the process-wide settings, loading them on first use."""
    return ChaincodeSettings()


def reset_settings() -> None:
    """Drops the cached settings so the next `get_settings` call reloads them."""
    get_settings.cache_clear()
