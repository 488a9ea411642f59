"""Command-line interface: read JSON, print environment variable assignments."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .constants import KEY_SEPARATOR, ARRAY_SEPARATOR
from .env_processor import Json2EnvError, convert_json_to_env
from .flattener import ParseOptions

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2env",
        description="Convert a JSON document into KEY=VALUE environment variable assignments.",
    )
    parser.add_argument(
        "-s", "--key-separator", metavar="STRING", default=KEY_SEPARATOR,
        help=f"Separator for nested keys (default: {KEY_SEPARATOR})",
    )
    parser.add_argument(
        "-S", "--array-separator", metavar="STRING", default=ARRAY_SEPARATOR,
        help=f"Separator for array elements (default: {ARRAY_SEPARATOR})",
    )
    parser.add_argument(
        "-e", "--enumerate-array", action="store_true",
        help="Separate array elements in multiple environment variables",
    )
    parser.add_argument("-i", "--input", type=Path, help="Path to JSON input (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="Path to output file (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: Optional[Path]) -> bytes:
    try:
        if path is None:
            return sys.stdin.buffer.read()
        return path.read_bytes()
    except OSError as e:
        raise Json2EnvError(f"Could not read input: {e}") from e


def _write_output(path: Optional[Path], text: str) -> None:
    try:
        if path is None:
            sys.stdout.buffer.write(text.encode("utf-8"))
            sys.stdout.flush()
        else:
            path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise Json2EnvError(f"Could not write output: {e}") from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = ParseOptions(
        key_separator=args.key_separator,
        array_separator=args.array_separator,
        enumerate_array=args.enumerate_array,
    )
    logger.debug("Using %s", options)

    try:
        content = _read_input(args.input)
        environ = convert_json_to_env(content, options)
        _write_output(args.output, environ)
    except Json2EnvError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
