"""Command line driver: parse a document and print the resulting tree."""

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import asdict

from ._config import ParseConfig
from ._errors import ParseError
from ._parser import loads
from ._profile import PROFILE_HOT_PATHS
from ._profile import format_hot_path_stats
from ._render import render

logger = logging.getLogger(__name__)

EXAMPLE_DOCUMENT = (
    '{"key": 42, "array": [1, 2, 3], "message": "hello world"}'
)

EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagjson",
        description="Parse a JSON document and print the parsed value tree.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="document to parse; '-' reads stdin, omitted uses a built-in example",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="maximum container nesting depth",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject raw control characters inside strings",
    )
    parser.add_argument(
        "--python",
        action="store_true",
        help="print the native Python repr instead of rendered JSON",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def _read_document(source: str | None) -> str:
    if source is None:
        return EXAMPLE_DOCUMENT
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as fh:
        return fh.read()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, object] = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.strict:
        overrides["strict"] = True

    try:
        config = ParseConfig.from_env(**overrides)
        document = _read_document(args.file)
    except (OSError, ValueError, TypeError) as e:
        print(f"tagjson: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    logger.debug(
        "parsing %d characters with max_depth=%d int_bits=%d strict=%s",
        len(document),
        config.max_depth,
        config.int_bits,
        config.strict,
    )

    try:
        value = loads(document, **asdict(config))
    except ParseError as e:
        logger.debug("parse failed: kind=%s offset=%d", e.kind.value, e.offset)
        print(f"tagjson: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    finally:
        if PROFILE_HOT_PATHS:
            print(format_hot_path_stats(), file=sys.stderr)

    logger.debug("parsed %s value", value.tag.value)
    if args.python:
        print(repr(value.to_python()))
    else:
        print(f"Parsed JSON: {render(value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
