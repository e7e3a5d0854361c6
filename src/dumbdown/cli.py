"""Command-line entry point: convert HTML or Markdown files to Dumbdown."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from dumbdown.converter import convert
from dumbdown.exceptions import ConversionError, InvalidInputError
from dumbdown.markdown_converter import convert_markdown
from dumbdown.token_count import count_tokens, humanize_count
from dumbdown.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dumbdown",
        description="Convert HTML (or Markdown) into plain-text Dumbdown.",
    )
    parser.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument("--markdown", action="store_true", help="Treat the input as Markdown instead of HTML")
    parser.add_argument("-o", "--output", help="Write the result to this file instead of stdout")
    parser.add_argument("--stats", action="store_true", help="Print character and token counts to stderr")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        source = read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read input", extra={"file": args.file, "error": str(exc)})
        print(f"dumbdown: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    converter = convert_markdown if args.markdown else convert
    try:
        result = converter(source)
    except InvalidInputError as exc:
        print(f"dumbdown: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except ConversionError as exc:
        print(f"dumbdown: {exc}", file=sys.stderr)
        return EXIT_CONVERSION_FAILED

    write_output(result, args.output)

    if args.stats:
        print(f"Characters: {len(result)}", file=sys.stderr)
        tokens = count_tokens(result)
        if tokens is not None:
            print(f"Estimated tokens: {humanize_count(tokens)}", file=sys.stderr)

    return EXIT_OK


def read_input(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def write_output(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        return
    sys.stdout.write(text + "\n")


if __name__ == "__main__":
    sys.exit(main())
