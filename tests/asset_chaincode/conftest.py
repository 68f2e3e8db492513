"""Test configuration and fixtures for asset_chaincode tests."""

from collections.abc import Generator

import pytest
from loguru import logger

from asset_chaincode.client import AssetClient
from asset_chaincode.contract import AssetChaincode, TransactionContext
from asset_chaincode.exceptions import StoreReadError
from asset_chaincode.host import ChaincodeHost
from asset_chaincode.models import MyAsset
from asset_chaincode.observability import ChaincodeMetrics, clear_trace_id
from asset_chaincode.storage import InMemoryStateStore

TX_ID = "mockTxID"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "integration: tests wiring host, client and stores together")
    config.addinivalue_line("markers", "contract: behavioral contracts shared by all implementations")


class FailingStateStore(InMemoryStateStore):
    """An in-memory store whose selected calls fail.

    Args:
        fail_on: The calls to fail, any of "get", "put" and "del".
        error: The exception raised; defaults to a `StoreReadError`.
    """

    def __init__(
        self,
        fail_on: set[str],
        error: Exception | None = None,
        initial: dict[str, bytes] | None = None,
    ) -> None:
        super().__init__(initial)
        self.fail_on = fail_on
        self.error = error or StoreReadError("backend unavailable", cause="backend unavailable")

    def get_state(self, key: str) -> bytes | None:
        if "get" in self.fail_on:
            raise self.error
        return super().get_state(key)

    def put_state(self, key: str, value: bytes) -> None:
        if "put" in self.fail_on:
            raise self.error
        super().put_state(key, value)

    def del_state(self, key: str) -> None:
        if "del" in self.fail_on:
            raise self.error
        super().del_state(key)


@pytest.fixture(autouse=True)
def isolate_trace_id() -> Generator[None, None, None]:
    """Ensures no trace ID leaks between tests."""
    clear_trace_id()
    yield
    clear_trace_id()


@pytest.fixture(autouse=True)
def reset_loguru_handlers() -> Generator[None, None, None]:
    """Keeps Loguru sinks from one test out of the next."""
    yield
    logger.remove()


@pytest.fixture
def store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def chaincode() -> AssetChaincode:
    return AssetChaincode()


@pytest.fixture
def metrics() -> ChaincodeMetrics:
    return ChaincodeMetrics()


@pytest.fixture
def host(chaincode: AssetChaincode, store: InMemoryStateStore, metrics: ChaincodeMetrics) -> ChaincodeHost:
    return ChaincodeHost(chaincode, store, metrics=metrics)


@pytest.fixture
def client(host: ChaincodeHost) -> AssetClient:
    return AssetClient(host)


@pytest.fixture
def make_context(store: InMemoryStateStore):
    """Factory building a transaction context over the shared in-memory store."""

    def _make(function: str, *args: str) -> TransactionContext:
        return TransactionContext(store, function, args, tx_id=TX_ID)

    return _make


def store_asset(store: InMemoryStateStore, key: str, value: str) -> bytes:
    """Writes a record straight into the store, bypassing the chaincode."""
    record = MyAsset(value=value).to_bytes(key)
    store.put_state(key, record)
    return record


@pytest.fixture
def seed(store: InMemoryStateStore):
    """Returns a function writing records straight into the shared store."""

    def _seed(key: str, value: str) -> bytes:
        return store_asset(store, key, value)

    return _seed


@pytest.fixture
def failing_store():
    """Factory for `FailingStateStore` instances."""

    def _make(
        fail_on: set[str], error: Exception | None = None, initial: dict[str, bytes] | None = None
    ) -> FailingStateStore:
        return FailingStateStore(fail_on, error=error, initial=initial)

    return _make
