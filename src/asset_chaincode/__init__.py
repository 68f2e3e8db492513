"""Asset Chaincode - CRUD contract over a single-key-per-asset ledger."""

from . import config, contract, models, observability, storage
from .client import AssetClient
from .contract import AssetChaincode, HealthChaincode, TransactionContext
from .exceptions import (
    AlreadyExistsError,
    ArgumentParseError,
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
    UnknownOperationError,
    ValidationError,
)
from .host import ChaincodeHost
from .models import MyAsset, Response, Status
from .storage import AbstractStateStore, InMemoryStateStore, JsonFileStateStore

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Modules
    "config",
    "contract",
    "models",
    "observability",
    "storage",
    # Contract
    "AssetChaincode",
    "HealthChaincode",
    "TransactionContext",
    "ChaincodeHost",
    "AssetClient",
    "MyAsset",
    "Response",
    "Status",
    "AbstractStateStore",
    "InMemoryStateStore",
    "JsonFileStateStore",
    # Exceptions
    "CoreError",
    "ConfigurationError",
    "UnknownOperationError",
    "MissingArgumentError",
    "ValidationError",
    "ArgumentParseError",
    "AlreadyExistsError",
    "NotFoundError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "StoreDeleteError",
    "SerializationError",
    "InvocationError",
]
