"""Command line entry point.

Runs single invocations of the asset contract against the configured state
store, printing the payload on stdout or the error message on stderr.

    asset-chaincode invoke createMyAsset key1 value1
    asset-chaincode invoke getMyAsset key1
    asset-chaincode --memory invoke ping
"""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError as PydanticValidationError

from asset_chaincode.config import ChaincodeSettings, get_settings
from asset_chaincode.exceptions import ConfigurationError, install_global_exception_handler
from asset_chaincode.host import ChaincodeHost
from asset_chaincode.models import Response
from asset_chaincode.observability import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asset-chaincode",
        description="Invoke the asset chaincode against a local state store.",
    )
    parser.add_argument("--state-file", help="JSON state file (overrides CHAINCODE_STATE_FILE)")
    parser.add_argument("--memory", action="store_true", help="use a throwaway in-memory store")
    parser.add_argument("--log-level", help="log level (overrides CHAINCODE_LOG_LEVEL)")
    parser.add_argument("--tx-id", help="transaction ID to run under")
    parser.add_argument("--metrics", action="store_true", help="print Prometheus metrics after the call")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init", help="run the chaincode init")
    invoke = subparsers.add_parser("invoke", help="invoke a chaincode function")
    invoke.add_argument("function", help="function name, e.g. createMyAsset")
    invoke.add_argument("args", nargs="*", help="function arguments")
    return parser


def load_settings(args: argparse.Namespace) -> ChaincodeSettings:
    """Loads settings from the environment, applying command line overrides.

    Without overrides the process-wide cached settings are returned.

    Raises:
        ConfigurationError: If the resulting settings are invalid.
    """
    overrides: dict[str, object] = {}
    if args.state_file:
        overrides["state_file"] = args.state_file
        overrides["state_backend"] = "file"
    if args.memory:
        overrides["state_backend"] = "memory"
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.metrics:
        overrides["metrics_enabled"] = True

    try:
        if not overrides:
            return get_settings()
        return ChaincodeSettings(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def print_response(response: Response) -> None:
    if response.is_ok:
        text = response.payload_text()
        if text is not None:
            print(text)
    else:
        print(f"Error: {response.message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Runs the CLI and returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    setup_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        app_name=settings.app_name,
        environment=settings.environment,
    )
    install_global_exception_handler()

    host = ChaincodeHost.from_settings(settings)
    with host.store:
        if args.command == "init":
            response = host.init(tx_id=args.tx_id)
        else:
            response = host.invoke(args.function, args.args, tx_id=args.tx_id)

    print_response(response)
    if args.metrics and host.metrics is not None:
        print(host.metrics.render())

    return 0 if response.is_ok else 1


if __name__ == "__main__":
    sys.exit(main())
