"""Chaincode dispatchers.

A chaincode maps function names to operations through an explicit table.
`invoke` looks the name up, runs the operation and converts any `CoreError`
into an error `Response`; the operation's payload is returned verbatim in a
success `Response`.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping

from asset_chaincode.exceptions import CoreError, UnknownOperationError
from asset_chaincode.models import Response
from asset_chaincode.observability.logging import get_logger, log_exception_with_context

from . import operations
from .context import TransactionContext

logger = get_logger(__name__)

Handler = Callable[[TransactionContext, list[str]], bytes | None]


class Chaincode(ABC):
    """Interface the host drives: one `init` per deployment, one `invoke` per request."""

    @property
    def functions(self) -> tuple[str, ...]:
        """The names this chaincode answers to."""
        return ()

    @abstractmethod
    def init(self, ctx: TransactionContext) -> Response:
        """Called when the chaincode is instantiated or upgraded."""
        pass

    @abstractmethod
    def invoke(self, ctx: TransactionContext) -> Response:
        """Serves one invocation."""
        pass


class RoutingChaincode(Chaincode):
    """A chaincode dispatching on an exact, case-sensitive function name."""

    name = "chaincode"

    @property
    @abstractmethod
    def handlers(self) -> Mapping[str, Handler]:
        """The function name -> operation table."""

    @property
    def functions(self) -> tuple[str, ...]:
        """The names this chaincode answers to."""
        return tuple(self.handlers)

    def unknown_function_message(self, function: str) -> str:
        return f"Unknown action/function, please check the first argument: {function}"

    def init(self, ctx: TransactionContext) -> Response:
        # Nothing to initialize
        logger.info(f"{self.name} init")
        return Response.success(None)

    def invoke(self, ctx: TransactionContext) -> Response:
        function, args = ctx.get_function_and_parameters()
        logger.debug(f"{self.name} invoke: {function}")

        try:
            handler = self.handlers.get(function)
            if handler is None:
                raise UnknownOperationError(self.unknown_function_message(function), function=function)
            payload = handler(ctx, args)
        except CoreError as e:
            log_exception_with_context(e, message=e.message, function=function, tx_id=ctx.tx_id)
            return Response.error(e.message)

        return Response.success(payload)


class AssetChaincode(RoutingChaincode):
    """The asset contract: a liveness probe plus CRUD over `MyAsset` records."""

    name = "AssetChaincode"

    def __init__(self) -> None:
        # Every mapping is explicit; adding an operation means editing this dict
        self._handlers: dict[str, Handler] = {
            "ping": operations.ping,
            "myAssetExists": operations.asset_exists,
            "createMyAsset": operations.create_asset,
            "getMyAsset": operations.read_asset,
            "updateMyAsset": operations.update_asset,
            "deleteMyAsset": operations.delete_asset,
        }

    @property
    def handlers(self) -> Mapping[str, Handler]:
        return self._handlers
