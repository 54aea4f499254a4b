#!/usr/bin/env python3

import argparse
import logging
import sys
from collections.abc import Sequence

from pantryscan.runtime import DEFAULT_OCR_URL, set_log_level


def _add_config_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print the receipt as JSON")
    parser.add_argument(
        "--stores",
        default=None,
        help="Known store names TOML file (default: config/store_names.toml)",
    )
    parser.add_argument(
        "--categories",
        action="append",
        default=None,
        help="Extra category keyword TOML file; repeat to layer (default: config/categories.toml)",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Grocery receipt parsing utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse [file]               Parse OCR text from a file ("-" or omitted: stdin)
  scan <image>               OCR a receipt image, then parse it
""",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse OCR text")
    parse_parser.add_argument("file", nargs="?", default="-", help="Text file to parse (default: stdin)")
    _add_config_options(parse_parser)

    # scan command
    scan_parser = subparsers.add_parser("scan", help="Scan a receipt image")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument(
        "--ocr-url", default=DEFAULT_OCR_URL, help=f"OCR service URL (default: {DEFAULT_OCR_URL})"
    )
    _add_config_options(scan_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    from pantryscan.cli.receipt import cmd_parse, cmd_scan

    if args.command == "parse":
        return cmd_parse(args)
    if args.command == "scan":
        return cmd_scan(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
