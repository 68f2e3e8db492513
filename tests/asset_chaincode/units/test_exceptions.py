"""Unit tests for exception system."""

import sys

import pytest

from asset_chaincode.exceptions import (
    AlreadyExistsError,
    ArgumentParseError,
    AssetStateError,
    ConfigurationError,
    CoreError,
    InvocationError,
    MissingArgumentError,
    NotFoundError,
    SerializationError,
    StoreDeleteError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    UnknownOperationError,
    ValidationError,
    enhance_exception_with_trace_id,
    install_global_exception_handler,
    uninstall_global_exception_handler,
)
from asset_chaincode.observability import TraceContext


@pytest.mark.unit
class TestCoreError:
    """Test cases for CoreError base exception."""

    def test_core_error_basic_creation(self) -> None:
        error = CoreError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "CoreError"
        assert error.details == {"trace_id": "no-trace"}
        assert str(error) == "Something went wrong"

    def test_core_error_with_error_code(self) -> None:
        error = CoreError("Something went wrong", error_code="CUSTOM_ERROR")

        assert str(error) == "[CUSTOM_ERROR] Something went wrong"

    def test_core_error_with_details(self) -> None:
        error = CoreError("Lookup failed", details={"key": "key1"})

        assert str(error) == "Lookup failed Details: {'key': 'key1'}"

    def test_core_error_captures_active_trace_id(self) -> None:
        with TraceContext("tx-42"):
            error = CoreError("inside a transaction")

        assert error.trace_id == "tx-42"
        assert error.details["trace_id"] == "tx-42"
        assert str(error) == "[tx-42] inside a transaction"

    def test_repr(self) -> None:
        error = CoreError("msg", trace_id="t1")
        assert repr(error) == "CoreError(message='msg', error_code='CoreError', trace_id='t1', details={'trace_id': 't1'})"


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test cases for the chaincode error taxonomy."""

    @pytest.mark.parametrize(
        "error, parents",
        [
            (ConfigurationError("x"), (CoreError,)),
            (UnknownOperationError("x", function="f"), (CoreError,)),
            (MissingArgumentError("x"), (CoreError,)),
            (ArgumentParseError("x"), (ValidationError, CoreError)),
            (AlreadyExistsError("x", key="k"), (AssetStateError, CoreError)),
            (NotFoundError("x", key="k"), (AssetStateError, CoreError)),
            (StoreReadError("x"), (StoreError, CoreError)),
            (StoreWriteError("x"), (StoreError, CoreError)),
            (StoreDeleteError("x"), (StoreError, CoreError)),
            (SerializationError("x"), (CoreError,)),
            (InvocationError("x", function="f", status=500), (CoreError,)),
        ],
    )
    def test_inheritance(self, error: CoreError, parents: tuple[type, ...]) -> None:
        for parent in parents:
            assert isinstance(error, parent)
        assert error.error_code == type(error).__name__

    def test_not_found_is_not_a_store_error(self) -> None:
        assert not isinstance(NotFoundError("x", key="k"), StoreError)


@pytest.mark.unit
class TestErrorDetails:
    """Test cases for the structured details of each error."""

    def test_unknown_operation(self) -> None:
        error = UnknownOperationError("unknown", function="frobnicate")

        assert error.function == "frobnicate"
        assert error.details["function"] == "frobnicate"

    def test_missing_argument(self) -> None:
        error = MissingArgumentError("missing", function="getMyAsset", expected=1, received=0)

        assert error.details["function"] == "getMyAsset"
        assert error.details["expected"] == 1
        assert error.details["received"] == 0

    def test_missing_argument_defaults(self) -> None:
        assert MissingArgumentError("missing").details == {"trace_id": "no-trace"}

    def test_argument_parse_error(self) -> None:
        error = ArgumentParseError("bad", field_name="payload", field_value="maybe")

        assert error.details["field_name"] == "payload"
        assert error.details["field_value"] == "maybe"

    def test_state_errors_carry_key(self) -> None:
        assert AlreadyExistsError("exists", key="key1").details["key"] == "key1"
        assert NotFoundError("missing", key="key1").key == "key1"

    def test_store_error(self) -> None:
        error = StoreReadError("read failed", key="key1", cause="timeout")

        assert error.key == "key1"
        assert error.cause == "timeout"
        assert error.details["cause"] == "timeout"

    def test_invocation_error(self) -> None:
        error = InvocationError("boom", function="getMyAsset", status=500)

        assert error.details["function"] == "getMyAsset"
        assert error.details["status"] == 500


@pytest.mark.unit
class TestTraceIdExceptionHandling:
    """Test cases for the trace ID exception hook."""

    def test_enhance_plain_exception(self) -> None:
        with TraceContext("tx-7"):
            exc = enhance_exception_with_trace_id(RuntimeError("boom"))

        assert str(exc) == "[tx-7] boom"

    def test_enhance_is_idempotent(self) -> None:
        with TraceContext("tx-7"):
            exc = enhance_exception_with_trace_id(enhance_exception_with_trace_id(RuntimeError("boom")))

        assert str(exc) == "[tx-7] boom"

    def test_enhance_without_trace(self) -> None:
        assert str(enhance_exception_with_trace_id(RuntimeError("boom"))) == "boom"

    def test_core_error_untouched(self) -> None:
        error = CoreError("msg")
        assert enhance_exception_with_trace_id(error) is error

    def test_install_and_uninstall(self) -> None:
        original = sys.excepthook
        install_global_exception_handler()
        try:
            assert sys.excepthook is not original
        finally:
            uninstall_global_exception_handler()

        assert sys.excepthook is original

    def test_install_twice_restores_original(self) -> None:
        original = sys.excepthook
        install_global_exception_handler()
        install_global_exception_handler()
        uninstall_global_exception_handler()

        assert sys.excepthook is original
