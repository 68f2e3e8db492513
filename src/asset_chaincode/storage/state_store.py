"""Abstract state store interface.

The state store is the external key/value ledger the chaincode reads and
writes. Implementations distinguish an absent key (`get_state` returns
`None`) from a backend failure (a `StoreError` subclass is raised).
"""

from abc import ABC, abstractmethod


class AbstractStateStore(ABC):
    """Abstract interface for a key/value state store.

    Keys are non-empty strings and values are opaque bytes. A `put_state`
    on an existing key overwrites it (last write wins).
    """

    @abstractmethod
    def get_state(self, key: str) -> bytes | None:
        """Retrieves the value stored under `key`.

        Args:
            key: The key to read.

        Returns:
            The stored bytes, or `None` if the key is absent.

        Raises:
            StoreReadError: If the backend fails.
        """
        pass

    @abstractmethod
    def put_state(self, key: str, value: bytes) -> None:
        """Stores `value` under `key`, replacing any existing value.

        Args:
            key: The key to write.
            value: The bytes to store.

        Raises:
            StoreWriteError: If the backend fails.
        """
        pass

    @abstractmethod
    def del_state(self, key: str) -> None:
        """Removes `key` from the store.

        Deleting an absent key is not an error.

        Args:
            key: The key to delete.

        Raises:
            StoreDeleteError: If the backend fails.
        """
        pass

    def close(self) -> None:
        """Releases any resources held by the store."""

    def __enter__(self) -> "AbstractStateStore":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()
