"""Asset operations.

Each operation takes the transaction context and the raw argument list,
raises a `CoreError` subclass on failure and returns the success payload.
`create`, `update` and `delete` share `guarded_transition`, which performs
the existence gate before the single mutating store call.

State machine per key:
    Absent --create--> Present --update*--> Present --delete--> Absent
"""

from collections.abc import Callable
from enum import Enum

from asset_chaincode.exceptions import (
    AlreadyExistsError,
    ArgumentParseError,
    MissingArgumentError,
    NotFoundError,
    StoreDeleteError,
    StoreError,
    StoreReadError,
    StoreWriteError,
)
from asset_chaincode.models import MyAsset
from asset_chaincode.observability.logging import get_logger

from .context import TransactionContext

logger = get_logger(__name__)

PING_PAYLOAD = b"Ok"
KEY_MISSING_MESSAGE = "Key parameter missing."
KEY_VALUE_MISSING_MESSAGE = "Key and/or value parameters missing."


class Presence(str, Enum):
    """Outcome of the existence gate. Store failures are raised instead."""

    PRESENT = "present"
    ABSENT = "absent"


class Precondition(str, Enum):
    """The presence a guarded transition requires before it may mutate."""

    MUST_BE_ABSENT = "must_be_absent"
    MUST_BE_PRESENT = "must_be_present"


def _require_args(ctx: TransactionContext, args: list[str], count: int, message: str) -> None:
    # Extra arguments are ignored
    if len(args) < count:
        raise MissingArgumentError(message, function=ctx.function, expected=count, received=len(args))


def _require_key(key: str) -> str:
    if not key:
        raise ArgumentParseError("Key must be a non-empty string.", field_name="key", field_value=key)
    try:
        key.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ArgumentParseError(
            f"Key must be valid UTF-8 text: {e.reason}.", field_name="key", field_value=repr(key)
        ) from e
    return key


def _store_cause(exc: StoreError) -> str:
    return exc.cause or exc.message


def read_state(ctx: TransactionContext, key: str) -> bytes | None:
    """Reads the raw record stored under `key`.

    Raises:
        StoreReadError: If the store read fails. The message names the key.
    """
    try:
        return ctx.get_state(key)
    except StoreError as e:
        raise StoreReadError(
            f"Failed to read asset with key '{key}'. Error: {_store_cause(e)}",
            key=key,
            cause=_store_cause(e),
        ) from e


def check_presence(ctx: TransactionContext, key: str) -> Presence:
    """The existence gate: reports whether a record is stored under `key`.

    Raises:
        StoreReadError: If the store read fails.
    """
    if read_state(ctx, key) is None:
        logger.info(f"Asset with key '{key}' was not found.")
        return Presence.ABSENT

    logger.info(f"Found asset with specified key: {key}")
    return Presence.PRESENT


def guarded_transition(
    ctx: TransactionContext,
    key: str,
    precondition: Precondition,
    mutation: Callable[[], bytes],
) -> bytes:
    """Runs `mutation` only if the gate reports the presence `precondition` asks for.

    Args:
        ctx: The transaction context.
        key: The asset key checked by the gate.
        precondition: Whether the key must be absent or present.
        mutation: Performs the single mutating store call and returns the payload.

    Returns:
        Whatever `mutation` returns.

    Raises:
        StoreReadError: If the gate's store read fails.
        AlreadyExistsError: If the key must be absent but is present.
        NotFoundError: If the key must be present but is absent.
    """
    presence = check_presence(ctx, key)

    if precondition is Precondition.MUST_BE_ABSENT and presence is Presence.PRESENT:
        raise AlreadyExistsError(f"Asset with key '{key}' already exists.", key=key)

    if precondition is Precondition.MUST_BE_PRESENT and presence is Presence.ABSENT:
        raise NotFoundError(f"Asset with key '{key}' does not exist.", key=key)

    return mutation()


def write_asset(ctx: TransactionContext, key: str, value: str) -> bytes:
    """Serializes `MyAsset(value)` and stores it under `key`.

    Returns:
        The stored record.

    Raises:
        SerializationError: If the record cannot be built.
        StoreWriteError: If the store write fails.
    """
    record = MyAsset(value=value).to_bytes(key)
    try:
        ctx.put_state(key, record)
    except StoreError as e:
        raise StoreWriteError(
            f"Failed to store asset with key '{key}', error = {_store_cause(e)}",
            key=key,
            cause=_store_cause(e),
        ) from e
    return record


def ping(ctx: TransactionContext, args: list[str]) -> bytes:
    """Liveness probe. Never touches the store."""
    logger.info("Ping to chaincode successful.")
    return PING_PAYLOAD


def asset_exists(ctx: TransactionContext, args: list[str]) -> bytes:
    """Returns b"true" or b"false" depending on whether the key is stored."""
    _require_args(ctx, args, 1, KEY_MISSING_MESSAGE)
    key = _require_key(args[0])

    presence = check_presence(ctx, key)
    return b"true" if presence is Presence.PRESENT else b"false"


def create_asset(ctx: TransactionContext, args: list[str]) -> bytes:
    """Creates a new asset; the key must not exist yet. Returns the record."""
    _require_args(ctx, args, 2, KEY_VALUE_MISSING_MESSAGE)
    key = _require_key(args[0])
    value = args[1]

    record = guarded_transition(ctx, key, Precondition.MUST_BE_ABSENT, lambda: write_asset(ctx, key, value))
    logger.info(f"Asset with key '{key}' successfully created.")
    return record


def read_asset(ctx: TransactionContext, args: list[str]) -> bytes:
    """Returns the raw stored record. Absence is an error here, unlike `asset_exists`."""
    _require_args(ctx, args, 1, KEY_MISSING_MESSAGE)
    key = _require_key(args[0])

    record = read_state(ctx, key)
    if record is None:
        raise NotFoundError(f"Could not find asset with key '{key}'", key=key)

    logger.info("Asset successfully read.")
    return record


def update_asset(ctx: TransactionContext, args: list[str]) -> bytes:
    """Overwrites an existing asset with a new value. Returns the new record."""
    _require_args(ctx, args, 2, KEY_VALUE_MISSING_MESSAGE)
    key = _require_key(args[0])
    value = args[1]

    record = guarded_transition(ctx, key, Precondition.MUST_BE_PRESENT, lambda: write_asset(ctx, key, value))
    logger.info("Asset successfully updated.")
    return record


def delete_asset(ctx: TransactionContext, args: list[str]) -> bytes:
    """Removes an existing asset. Returns the key, not the deleted value."""
    _require_args(ctx, args, 1, KEY_MISSING_MESSAGE)
    key = _require_key(args[0])
    payload = key.encode("utf-8")

    def remove() -> bytes:
        try:
            ctx.del_state(key)
        except StoreError as e:
            raise StoreDeleteError(
                f"Failed to delete asset with key '{key}'. Error: {_store_cause(e)}",
                key=key,
                cause=_store_cause(e),
            ) from e
        return payload

    guarded_transition(ctx, key, Precondition.MUST_BE_PRESENT, remove)
    logger.info("Asset successfully deleted.")
    return payload
