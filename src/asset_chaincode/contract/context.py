"""Per-invocation transaction context.

The context is the only capability an operation receives: it names the
invoked function and its arguments, carries the transaction ID, and gives
access to the state store. Backend exceptions that are not already
`StoreError`s are wrapped so operations only ever see the store taxonomy.
"""

from collections.abc import Sequence

from asset_chaincode.exceptions import StoreDeleteError, StoreError, StoreReadError, StoreWriteError
from asset_chaincode.observability.trace_id import generate_trace_id
from asset_chaincode.storage import AbstractStateStore


class TransactionContext:
    """The execution context of a single invocation.

    Attributes:
        tx_id (str): The transaction ID; also used as the trace ID.
        function (str): The invoked function name.
        args (tuple[str, ...]): The invocation arguments, in order.
    """

    def __init__(
        self,
        store: AbstractStateStore,
        function: str,
        args: Sequence[str] = (),
        tx_id: str | None = None,
    ) -> None:
        self._store = store
        self.function = function
        self.args = tuple(args)
        self.tx_id = tx_id or generate_trace_id()

    def get_function_and_parameters(self) -> tuple[str, list[str]]:
        """Returns the function name and a fresh list of its arguments."""
        return self.function, list(self.args)

    def get_state(self, key: str) -> bytes | None:
        """Reads `key` from the store; `None` means absent.

        Raises:
            StoreReadError: If the backend fails.
        """
        try:
            return self._store.get_state(key)
        except StoreError:
            raise
        except Exception as e:
            raise StoreReadError(str(e), key=key, cause=str(e)) from e

    def put_state(self, key: str, value: bytes) -> None:
        """Writes `value` under `key`.

        Raises:
            StoreWriteError: If the backend fails.
        """
        try:
            self._store.put_state(key, value)
        except StoreError:
            raise
        except Exception as e:
            raise StoreWriteError(str(e), key=key, cause=str(e)) from e

    def del_state(self, key: str) -> None:
        """Deletes `key` from the store.

        Raises:
            StoreDeleteError: If the backend fails.
        """
        try:
            self._store.del_state(key)
        except StoreError:
            raise
        except Exception as e:
            raise StoreDeleteError(str(e), key=key, cause=str(e)) from e

    def __repr__(self) -> str:
        return f"TransactionContext(tx_id='{self.tx_id}', function='{self.function}', args={list(self.args)})"
