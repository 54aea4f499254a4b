"""Parse raw OCR text into a structured ParsedReceipt."""

import re
from collections.abc import Callable, Sequence
from decimal import Decimal

from pantryscan.domain.receipt import ParsedReceipt, PurchaseItem
from pantryscan.runtime.logging import get_logger

from .fallback import extract_keyword_items
from .item_matcher import match_item_line
from .line_classifier import LineKind, classify_line
from .taxonomy import CategoryTaxonomy

logger = get_logger(__name__)

# D[D]/D[D]/YY[YY], with "/" or "-" separators
DATE_PATTERN = re.compile(r"\d{1,2}[/-]\d{1,2}[/-]\d{2,4}")

StoreNameStrategy = Callable[[Sequence[str]], str | None]


def normalize_lines(raw_text: str) -> list[str]:
    """Split text on newlines, trim each line and drop empty ones, keeping order."""
    return [line.strip() for line in raw_text.split("\n") if line.strip()]


def first_line_store_name(lines: Sequence[str]) -> str | None:
    """Default store-name strategy: the first non-empty line."""
    return lines[0] if lines else None


def known_store_strategy(known_names: Sequence[str]) -> StoreNameStrategy:
    """
    Build a store-name strategy that prefers configured store names.

    Names are searched longest first, case-insensitively and on word
    boundaries, anywhere in the receipt. When none is present the first
    line is used.
    """
    ordered = sorted((name for name in known_names if name.strip()), key=len, reverse=True)

    def strategy(lines: Sequence[str]) -> str | None:
        text = "\n".join(lines).upper()
        for name in ordered:
            pattern = r"\b" + re.escape(name.upper()) + r"\b"
            if re.search(pattern, text):
                return name
        return first_line_store_name(lines)

    return strategy


def extract_date(lines: Sequence[str]) -> str | None:
    """Return the first date-shaped substring in scan order, verbatim."""
    for line in lines:
        match = DATE_PATTERN.search(line)
        if match:
            return match.group(0)
    return None


def _structured_pass(
    lines: Sequence[str],
    taxonomy: CategoryTaxonomy | None,
) -> tuple[list[PurchaseItem], Decimal | None]:
    items: list[PurchaseItem] = []
    total_amount: Decimal | None = None

    for line in lines:
        classification = classify_line(line)
        if classification.kind is LineKind.NOISE:
            continue
        if classification.kind is LineKind.TOTAL:
            # First total wins; later total lines are ignored.
            if total_amount is None and classification.amount is not None:
                total_amount = classification.amount
            continue

        item = match_item_line(line, taxonomy)
        if item is not None:
            items.append(item)

    return items, total_amount


def parse(
    raw_text: str,
    *,
    taxonomy: CategoryTaxonomy | None = None,
    store_name_strategy: StoreNameStrategy | None = None,
) -> ParsedReceipt:
    """
    Parse OCR text of a grocery receipt.

    This is heuristic-based and never raises for string input: text it
    cannot make sense of yields a receipt with no items.

    Args:
        raw_text: Full OCR text of the receipt
        taxonomy: Category taxonomy for item tagging (built-in table if None)
        store_name_strategy: Picks the store name from normalized lines
            (first line if None)

    Returns:
        ParsedReceipt with items in line order and raw_text unchanged
    """
    lines = normalize_lines(raw_text)
    strategy = store_name_strategy or first_line_store_name

    items, total_amount = _structured_pass(lines, taxonomy)
    if items:
        logger.debug("Structured pass extracted %d item(s)", len(items))
    else:
        items = extract_keyword_items(lines, taxonomy)
        logger.debug("Structured pass found no items; keyword fallback extracted %d", len(items))

    return ParsedReceipt(
        raw_text=raw_text,
        items=tuple(items),
        total_amount=total_amount,
        date=extract_date(lines),
        store_name=strategy(lines),
    )
