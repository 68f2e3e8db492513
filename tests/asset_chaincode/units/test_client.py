"""Unit tests for the typed client."""

import pytest

from asset_chaincode.client import AssetClient, parse_bool
from asset_chaincode.exceptions import ArgumentParseError, InvocationError
from asset_chaincode.models import MyAsset, Response


@pytest.mark.unit
class TestParseBool:
    """Test cases for the strict boolean parser."""

    @pytest.mark.parametrize("text", ["1", "t", "T", "true", "TRUE", "True"])
    def test_true_values(self, text: str) -> None:
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "false", "FALSE", "False"])
    def test_false_values(self, text: str) -> None:
        assert parse_bool(text) is False

    @pytest.mark.parametrize("text", ["", "yes", "no", "tRuE", " true", "Ok"])
    def test_malformed_values(self, text: str) -> None:
        with pytest.raises(ArgumentParseError) as exc_info:
            parse_bool(text)

        assert exc_info.value.field_name == "payload"


@pytest.mark.unit
class TestAssetClient:
    """Test cases for AssetClient against a stubbed host."""

    def test_error_response_raises(self, mocker) -> None:
        host = mocker.MagicMock()
        host.invoke.return_value = Response.error("Could not find asset with key 'k'")

        with pytest.raises(InvocationError) as exc_info:
            AssetClient(host).read("k")

        assert exc_info.value.function == "getMyAsset"
        assert exc_info.value.status == 500
        assert exc_info.value.message == "Could not find asset with key 'k'"
        host.invoke.assert_called_once_with("getMyAsset", ("k",))

    def test_malformed_exists_payload(self, mocker) -> None:
        host = mocker.MagicMock()
        host.invoke.return_value = Response.success(b"maybe")

        with pytest.raises(ArgumentParseError):
            AssetClient(host).exists("k")

    def test_round_trip(self, client: AssetClient) -> None:
        assert client.ping() == "Ok"
        assert client.exists("k") is False
        assert client.create("k", "v") == MyAsset(value="v")
        assert client.exists("k") is True
        assert client.update("k", "v2") == MyAsset(value="v2")
        assert client.read("k").value == "v2"
        assert client.delete("k") == "k"
        assert client.exists("k") is False
