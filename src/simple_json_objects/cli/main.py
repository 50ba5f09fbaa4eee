"""Main CLI entry point for the simple-json-objects command-line tool.

Reads JSON documents from files or stdin, materializes each one with the
selected entry operation and prints the resulting value.
"""

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Optional, TextIO

import ijson

from simple_json_objects import __version__
from simple_json_objects.api import JSONObjects
from simple_json_objects.shared import (
    ConfigError,
    Feature,
    JSONObjectError,
    ReaderConfig,
    configure_logging,
    get_logger,
)

OPERATIONS = {
    "any": JSONObjects.any_from,
    "map": JSONObjects.map_from,
    "list": JSONObjects.list_from,
    "array": JSONObjects.array_from,
}


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="simple-json-objects",
        description="Materialize JSON documents into plain Python values"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="JSON files to read (default: stdin)"
    )
    parser.add_argument(
        "--as",
        dest="operation",
        choices=sorted(OPERATIONS),
        default="any",
        help="Entry operation: any value, map, list or array (default: any)"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["json", "repr"],
        default="json",
        help="Output format; json renders decimals as strings (default: json)"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Reader configuration file (JSON, see ReaderConfig.to_dict)"
    )
    parser.add_argument(
        "--big-decimal",
        action="store_true",
        help="Read floating-point numbers as exact decimals"
    )
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Produce read-only containers"
    )
    parser.add_argument(
        "--fail-on-duplicate-keys",
        action="store_true",
        help="Reject objects that repeat a key"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum nesting depth"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def build_config(args: argparse.Namespace) -> ReaderConfig:
    """Combine the optional config file with command-line flags."""
    config = ReaderConfig()
    if args.config is not None:
        config = ReaderConfig.from_json(args.config.read_text(encoding="utf-8"))

    features = config.features
    if args.big_decimal:
        features |= Feature.USE_BIG_DECIMAL_FOR_FLOATS
    if args.read_only:
        features |= Feature.READ_ONLY
    if args.fail_on_duplicate_keys:
        features |= Feature.FAIL_ON_DUPLICATE_MAP_KEYS
    config = config.with_features(features)

    if args.max_depth is not None:
        config = config.override(max_nesting_depth=args.max_depth)
    return config


def _json_default(value: Any) -> Any:
    if isinstance(value, MappingProxyType):
        return dict(value)
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_value(value: Any, output_format: str) -> str:
    """Render a materialized value for output."""
    if output_format == "repr":
        return repr(value)
    return json.dumps(value, default=_json_default, ensure_ascii=False)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    configure_logging(args.verbose)
    logger = get_logger(__name__, None, "cli")

    try:
        config = build_config(args)
    except (ConfigError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    objects = JSONObjects().with_config(config)
    operation = OPERATIONS[args.operation]
    inputs = args.paths or [None]
    exit_code = 0

    for path in inputs:
        label = str(path) if path is not None else "<stdin>"
        try:
            if path is None:
                value = operation(objects, stdin.read())
            else:
                value = operation(objects, path)
        except (
            JSONObjectError, ijson.JSONError, ValueError, OSError, RecursionError
        ) as e:
            logger.error("Failed to read input", extra={"input": label})
            print(f"{label}: {e}", file=sys.stderr)
            exit_code = 1
            continue
        print(format_value(value, args.format), file=stdout)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
