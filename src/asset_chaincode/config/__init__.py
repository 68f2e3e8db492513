"""Configuration package for asset_chaincode.

- base: Core settings (application name, environment, debug)
- observability: Logging and metrics configuration
- storage: State store configuration
- settings: Unified settings inheriting from all of the above
"""

from .base import BaseCoreSettings
from .observability import ObservabilityConfig
from .settings import ChaincodeSettings, get_settings, reset_settings
from .storage import StorageConfig

__all__ = [
    "BaseCoreSettings",
    "ObservabilityConfig",
    "StorageConfig",
    "ChaincodeSettings",
    "get_settings",
    "reset_settings",
]
