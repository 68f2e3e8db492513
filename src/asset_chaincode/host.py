"""Local chaincode host.

`ChaincodeHost` stands in for the ledger peer: it owns a chaincode and a
state store, builds one `TransactionContext` per call, and runs the call
synchronously to completion under a trace context keyed by the transaction
ID. Outcomes are logged and, when enabled, recorded as Prometheus metrics.
"""

import time
from collections.abc import Callable, Sequence

from asset_chaincode.config import ChaincodeSettings
from asset_chaincode.contract import AssetChaincode, Chaincode, TransactionContext
from asset_chaincode.exceptions import CoreError
from asset_chaincode.models import Response
from asset_chaincode.observability import ChaincodeMetrics, TraceContext, get_logger, log_exception_with_context
from asset_chaincode.observability.metrics import UNKNOWN_FUNCTION_LABEL
from asset_chaincode.storage import AbstractStateStore, InMemoryStateStore, JsonFileStateStore

logger = get_logger(__name__)

INIT_FUNCTION = "init"


class ChaincodeHost:
    """Runs invocations of one chaincode against one state store.

    Attributes:
        chaincode (Chaincode): The contract being served.
        store (AbstractStateStore): The state store handed to every transaction context.
        metrics (ChaincodeMetrics | None): Invocation metrics, or `None` when disabled.
    """

    def __init__(
        self,
        chaincode: Chaincode,
        store: AbstractStateStore,
        metrics: ChaincodeMetrics | None = None,
    ) -> None:
        self.chaincode = chaincode
        self.store = store
        self.metrics = metrics

    @classmethod
    def from_settings(cls, settings: ChaincodeSettings, chaincode: Chaincode | None = None) -> "ChaincodeHost":
        """Builds a host whose store and metrics follow `settings`.

        Args:
            settings: The application settings.
            chaincode: The contract to serve; defaults to `AssetChaincode`.
        """
        store: AbstractStateStore
        if settings.state_backend == "memory":
            store = InMemoryStateStore()
        else:
            store = JsonFileStateStore(settings.state_file)

        metrics = ChaincodeMetrics(namespace=settings.metrics_namespace) if settings.metrics_enabled else None
        return cls(chaincode or AssetChaincode(), store, metrics=metrics)

    def init(self, tx_id: str | None = None) -> Response:
        """Calls the chaincode's `init` in a fresh transaction context."""
        ctx = TransactionContext(self.store, INIT_FUNCTION, (), tx_id=tx_id)
        return self._run(ctx, self.chaincode.init)

    def invoke(self, function: str, args: Sequence[str] = (), tx_id: str | None = None) -> Response:
        """Invokes `function` with `args` in a fresh transaction context.

        Args:
            function: The function name, matched exactly by the chaincode.
            args: The string arguments, forwarded unmodified.
            tx_id: The transaction ID; a new one is generated when omitted.

        Returns:
            The chaincode's `Response`.
        """
        ctx = TransactionContext(self.store, function, args, tx_id=tx_id)
        return self._run(ctx, self.chaincode.invoke)

    def _metric_label(self, function: str) -> str:
        # Bounded label set: the exposed names, init, and one bucket for the rest
        if function == INIT_FUNCTION or function in self.chaincode.functions:
            return function
        return UNKNOWN_FUNCTION_LABEL

    def _run(self, ctx: TransactionContext, entry_point: Callable[[TransactionContext], Response]) -> Response:
        with TraceContext(ctx.tx_id):
            logger.info(f"Transaction {ctx.tx_id} started: {ctx.function}")
            start_time = time.perf_counter()

            try:
                response = entry_point(ctx)
            except CoreError as e:
                log_exception_with_context(e, message=f"{ctx.function} raised: {e.message}")
                response = Response.error(e.message)

            duration = time.perf_counter() - start_time
            if self.metrics is not None:
                self.metrics.record(self._metric_label(ctx.function), response.is_ok, duration)

            if response.is_ok:
                logger.info(f"Transaction {ctx.tx_id} completed: {ctx.function} in {duration * 1000:.2f}ms")
            else:
                logger.warning(f"Transaction {ctx.tx_id} failed: {ctx.function}: {response.message}")

        return response
