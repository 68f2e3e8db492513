"""In-memory state store."""

from .state_store import AbstractStateStore


class InMemoryStateStore(AbstractStateStore):
    """A dict-backed state store.

    Used by the tests and by the local host when no persistence is wanted.
    Values are copied on the way in so callers cannot mutate stored state.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._state: dict[str, bytes] = {key: bytes(value) for key, value in (initial or {}).items()}

    def get_state(self, key: str) -> bytes | None:
        return self._state.get(key)

    def put_state(self, key: str, value: bytes) -> None:
        self._state[key] = bytes(value)

    def del_state(self, key: str) -> None:
        self._state.pop(key, None)

    def keys(self) -> list[str]:
        """Returns the stored keys in sorted order."""
        return sorted(self._state)

    def snapshot(self) -> dict[str, bytes]:
        """Returns a copy of the whole store."""
        return dict(self._state)

    def __len__(self) -> int:
        return len(self._state)

    def __contains__(self, key: object) -> bool:
        return key in self._state
