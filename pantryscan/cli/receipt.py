"""Receipt command handlers used by the CLI."""

import argparse
import sys
from pathlib import Path

from pantryscan.domain.receipt import ParsedReceipt
from pantryscan.receipt.formatter import format_parsed_receipt, receipt_to_json
from pantryscan.receipt.parser import known_store_strategy, parse
from pantryscan.runtime import (
    OCRServiceUnavailable,
    fetch_receipt_text,
    get_logger,
    load_category_taxonomy,
    load_known_store_names,
)

logger = get_logger(__name__)


def _parse_with_config(text: str, args: argparse.Namespace) -> ParsedReceipt:
    categories = tuple(args.categories) if args.categories else None
    taxonomy = load_category_taxonomy(categories)
    store_names = load_known_store_names(args.stores)
    strategy = known_store_strategy(store_names) if store_names else None
    return parse(text, taxonomy=taxonomy, store_name_strategy=strategy)


def _print_receipt(receipt: ParsedReceipt, as_json: bool) -> None:
    if as_json:
        print(receipt_to_json(receipt))
    else:
        print(format_parsed_receipt(receipt))


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse OCR text from a file (or stdin) and print the result."""
    if args.file == "-":
        text = sys.stdin.read()
    else:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: text file not found: {path}")
            return 1
        text = path.read_text(encoding="utf-8", errors="replace")

    receipt = _parse_with_config(text, args)
    logger.info("Parsed %d item(s) from %s", len(receipt.items), args.file)
    _print_receipt(receipt, args.json)
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """Run OCR on a receipt image, then parse and print the result."""
    image_path = Path(args.image)
    if not image_path.exists():
        logger.error("Receipt file not found: %s", image_path)
        print(f"Error: receipt file not found: {image_path}")
        return 1

    try:
        text = fetch_receipt_text(image_path, args.ocr_url)
    except OCRServiceUnavailable as exc:
        print(f"OCR service unavailable: {exc}")
        print("Make sure the OCR service is running before scanning receipts.")
        return 1

    receipt = _parse_with_config(text, args)
    if not receipt.items:
        logger.warning("No items found in %s", image_path)
    _print_receipt(receipt, args.json)
    return 0
