"""Storage package for asset_chaincode.

Defines the abstract state store the chaincode talks to
(`AbstractStateStore`) and two implementations: an in-memory store and a
JSON file store used by the command line host.
"""

from .file import JsonFileStateStore
from .memory import InMemoryStateStore
from .state_store import AbstractStateStore

__all__ = ["AbstractStateStore", "InMemoryStateStore", "JsonFileStateStore"]
