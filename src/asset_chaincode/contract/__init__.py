"""Chaincode contracts: the transaction context, the asset operations and the dispatchers."""

from .chaincode import AssetChaincode, Chaincode, RoutingChaincode
from .context import TransactionContext
from .health import HealthChaincode
from .operations import Precondition, Presence, check_presence, guarded_transition

__all__ = [
    "Chaincode",
    "RoutingChaincode",
    "AssetChaincode",
    "HealthChaincode",
    "TransactionContext",
    "Presence",
    "Precondition",
    "check_presence",
    "guarded_transition",
]
