"""Structured extraction of purchase items from candidate receipt lines."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from pantryscan.domain.receipt import PurchaseItem, Unit, UnitTag, normalize_unit

from .line_classifier import is_noise, to_decimal
from .taxonomy import CategoryTaxonomy, categorize_item

# "2.99", "3,50" (comma decimal), "12"
NUMBER = r"\d+(?:[.,]\d+)?"
# Price at end of line, optionally "$"-prefixed and followed by a tax flag ("2.99 H")
PRICE = rf"\$?(?P<price>{NUMBER})(?:\s*[HhTtJj])?"

# The quantity marker must not run into a word: "12 Xtra Sharp" is a name, not 12 x "tra Sharp"
QUANTITY_PREFIXED = re.compile(
    rf"^(?P<qty>\d+)\s*[xX×](?![A-Za-z])\s*(?P<name>\S(?:.*?\S)?)\s+{PRICE}$"
)
QUANTITY_WITH_UNIT = re.compile(
    rf"^(?P<name>.*?\S)\s+(?P<qty>{NUMBER})(?:\s*(?P<unit>[A-Za-z]{{1,12}}))?\s+{PRICE}$"
)
BARE_NAME_PRICE = re.compile(rf"^(?P<name>.*?\S)\s+{PRICE}$")


def parse_number(token: str) -> Decimal | None:
    """Parse a receipt number, treating a comma as the decimal separator."""
    return to_decimal(token.replace(",", "."))


@dataclass(frozen=True)
class LineFields:
    """Fields pulled out of a line before validation."""

    name: str
    quantity: Decimal
    unit: UnitTag
    price: Decimal | None


def _fields_from_quantity_prefixed(match: re.Match[str]) -> LineFields | None:
    quantity = to_decimal(match.group("qty"))
    price = parse_number(match.group("price"))
    if quantity is None or price is None:
        return None
    return LineFields(match.group("name").strip(), quantity, Unit.PIECE, price)


def _fields_from_quantity_with_unit(match: re.Match[str]) -> LineFields | None:
    quantity = parse_number(match.group("qty"))
    price = parse_number(match.group("price"))
    if quantity is None or price is None:
        return None
    return LineFields(match.group("name").strip(), quantity, normalize_unit(match.group("unit")), price)


def _fields_from_bare_name_price(match: re.Match[str]) -> LineFields | None:
    name = match.group("name").strip()
    # "CASH 20.00" must not come back as an item called "CASH".
    if is_noise(name):
        return None
    price = parse_number(match.group("price"))
    if price is None:
        return None
    return LineFields(name, Decimal("1"), Unit.PIECE, price)


@dataclass(frozen=True)
class ItemPattern:
    """One structural item-line rule."""

    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], LineFields | None]


# Tried in order; the first pattern that yields fields wins.
ITEM_PATTERNS: tuple[ItemPattern, ...] = (
    ItemPattern("quantity_prefixed", QUANTITY_PREFIXED, _fields_from_quantity_prefixed),
    ItemPattern("quantity_with_unit", QUANTITY_WITH_UNIT, _fields_from_quantity_with_unit),
    ItemPattern("bare_name_price", BARE_NAME_PRICE, _fields_from_bare_name_price),
)


def apply_pattern(pattern: ItemPattern, line: str) -> LineFields | None:
    """Apply a single rule to a line, returning None unless it yields a valid item."""
    match = pattern.regex.match(line)
    if not match:
        return None
    fields = pattern.extract(match)
    if fields is None or not fields.name or fields.quantity <= 0:
        return None
    return fields


def match_item_line(line: str, taxonomy: CategoryTaxonomy | None = None) -> PurchaseItem | None:
    """
    Extract a purchase item from a candidate line.

    Handles three layouts, in this order:
    - "2x Milk 5.98"          (quantity prefix)
    - "Bananas 1.5 kg 3.50"   (quantity with optional unit)
    - "Milk 2.99"             (name and price)

    Args:
        line: Trimmed line already classified as a candidate
        taxonomy: Category taxonomy used to tag the extracted name

    Returns:
        PurchaseItem, or None when no pattern applies
    """
    for pattern in ITEM_PATTERNS:
        fields = apply_pattern(pattern, line)
        if fields is None:
            continue
        return PurchaseItem(
            name=fields.name,
            quantity=fields.quantity,
            unit=fields.unit,
            price=fields.price,
            category=categorize_item(fields.name, taxonomy),
        )
    return None
