"""JSON file backed state store.

The ledger is kept in a single JSON object mapping keys to base64-encoded
values. Every mutation rewrites the file through a temporary sibling that
atomically replaces the original, so a crash never leaves a half-written
ledger behind.
"""

import base64
import binascii
import json
import os
import tempfile
from pathlib import Path

from asset_chaincode.exceptions import StoreDeleteError, StoreReadError, StoreWriteError
from asset_chaincode.observability.logging import get_logger

from .state_store import AbstractStateStore

logger = get_logger(__name__)


class JsonFileStateStore(AbstractStateStore):
    """A state store persisted to a JSON file.

    The file is read on every access, which keeps separate processes (for
    example consecutive CLI runs) consistent with each other.

    Attributes:
        path (Path): Location of the JSON state file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self, key: str) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreReadError(
                f"Failed to load state file '{self.path}': {e}",
                key=key,
                cause=str(e),
            ) from e

        if not isinstance(data, dict):
            raise StoreReadError(
                f"State file '{self.path}' does not contain a JSON object",
                key=key,
                cause="invalid state file",
            )
        return data

    def _dump(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_state(self, key: str) -> bytes | None:
        encoded = self._load(key).get(key)
        if encoded is None:
            return None

        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise StoreReadError(
                f"Corrupt value stored under key '{key}'",
                key=key,
                cause=str(e),
            ) from e

    def put_state(self, key: str, value: bytes) -> None:
        data = self._load(key)
        data[key] = base64.b64encode(value).decode("ascii")
        try:
            self._dump(data)
        except OSError as e:
            raise StoreWriteError(f"Failed to write state file '{self.path}': {e}", key=key, cause=str(e)) from e
        logger.debug(f"Wrote {len(value)} bytes under key '{key}' to {self.path}")

    def del_state(self, key: str) -> None:
        data = self._load(key)
        if data.pop(key, None) is None:
            return
        try:
            self._dump(data)
        except OSError as e:
            raise StoreDeleteError(f"Failed to write state file '{self.path}': {e}", key=key, cause=str(e)) from e
        logger.debug(f"Removed key '{key}' from {self.path}")
