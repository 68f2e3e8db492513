"""Typed client over a chaincode host.

`AssetClient` turns `Response`s back into Python values and error responses
into `InvocationError`s, so callers do not have to inspect status codes or
decode payloads themselves.
"""

from asset_chaincode.exceptions import ArgumentParseError, InvocationError
from asset_chaincode.host import ChaincodeHost
from asset_chaincode.models import MyAsset

_TRUE_STRINGS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def parse_bool(text: str) -> bool:
    """Parses a boolean payload strictly.

    Accepts 1, t, T, true, TRUE, True and their false counterparts.

    Raises:
        ArgumentParseError: If `text` is any other string.
    """
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ArgumentParseError(f"Failed to parse boolean, invalid syntax: '{text}'", field_name="payload", field_value=text)


class AssetClient:
    """Convenience wrapper around `ChaincodeHost` for the asset contract."""

    def __init__(self, host: ChaincodeHost) -> None:
        self.host = host

    def _call(self, function: str, *args: str) -> bytes | None:
        response = self.host.invoke(function, args)
        if not response.is_ok:
            raise InvocationError(response.message, function=function, status=response.status)
        return response.payload

    def _call_text(self, function: str, *args: str) -> str:
        payload = self._call(function, *args)
        return payload.decode("utf-8") if payload is not None else ""

    def _call_asset(self, function: str, *args: str) -> MyAsset:
        payload = self._call(function, *args)
        return MyAsset.from_bytes(payload or b"", key=args[0] if args else None)

    def ping(self) -> str:
        return self._call_text("ping")

    def exists(self, key: str) -> bool:
        return parse_bool(self._call_text("myAssetExists", key))

    def create(self, key: str, value: str) -> MyAsset:
        return self._call_asset("createMyAsset", key, value)

    def read(self, key: str) -> MyAsset:
        return self._call_asset("getMyAsset", key)

    def update(self, key: str, value: str) -> MyAsset:
        return self._call_asset("updateMyAsset", key, value)

    def delete(self, key: str) -> str:
        """Deletes `key` and returns the key echoed back by the chaincode."""
        return self._call_text("deleteMyAsset", key)
