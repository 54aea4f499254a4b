"""Keyword-driven item extraction used when no line matched a structured pattern."""

import re
import string
from collections.abc import Sequence

from pantryscan.domain.receipt import PurchaseItem

from .item_matcher import PRICE, parse_number
from .line_classifier import LineKind, classify_line, contains_grocery_keyword
from .taxonomy import CategoryTaxonomy, categorize_item

# Price at the end of a line, starting where a number starts ("BANANA@0.59 H")
TRAILING_PRICE = re.compile(rf"(?<![\d.,]){PRICE}\s*$")
# Separators left dangling once the price is cut off, e.g. "BANANA @" or "MILK -"
TRAILING_SEPARATORS = string.whitespace + "$@#:=*,./-"


def _split_trailing_price(line: str) -> tuple[str, str | None]:
    match = TRAILING_PRICE.search(line)
    if not match:
        return line, None
    return line[: match.start()], match.group("price")


def extract_keyword_items(
    lines: Sequence[str],
    taxonomy: CategoryTaxonomy | None = None,
) -> list[PurchaseItem]:
    """
    Extract items from lines that mention a grocery keyword.

    Each qualifying line becomes one item: a trailing number (if any) is the
    price and the rest of the line is the name. Noise lines and total lines
    are skipped.

    Args:
        lines: Normalized (trimmed, non-empty) receipt lines
        taxonomy: Category taxonomy used to tag extracted names

    Returns:
        Items in line order; empty when no line mentions a grocery keyword
    """
    items: list[PurchaseItem] = []
    for line in lines:
        if not contains_grocery_keyword(line):
            continue
        if classify_line(line).kind is not LineKind.CANDIDATE:
            continue

        name_part, price_token = _split_trailing_price(line)
        name = name_part.rstrip(TRAILING_SEPARATORS).strip()
        price = parse_number(price_token) if price_token is not None else None
        items.append(
            PurchaseItem(
                name=name,
                price=price,
                category=categorize_item(name, taxonomy),
            )
        )
    return items
