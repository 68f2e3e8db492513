"""Standalone health-check chaincode.

Deployed next to the asset contract so operators can probe the peer without
touching any asset state. It answers a single function, `Health`.
"""

from collections.abc import Mapping

from asset_chaincode.observability.logging import get_logger

from .chaincode import Handler, RoutingChaincode
from .context import TransactionContext

logger = get_logger(__name__)

HEALTH_PAYLOAD = b"Ok"


def health(ctx: TransactionContext, args: list[str]) -> bytes:
    logger.info("Chaincode is healthy.")
    return HEALTH_PAYLOAD


class HealthChaincode(RoutingChaincode):
    """Answers `Health` with `Ok`; every other name is an unknown operation."""

    name = "HealthChaincode"

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {"Health": health}

    @property
    def handlers(self) -> Mapping[str, Handler]:
        return self._handlers

    def unknown_function_message(self, function: str) -> str:
        return f"Unknown action, please check the first argument, expecting 'Health'. Instead, got: {function}"
