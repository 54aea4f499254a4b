"""Data models for parsed grocery receipts."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class Unit(str, Enum):
    """Normalized inventory units."""

    KG = "kg"
    G = "g"
    LB = "lb"
    OZ = "oz"
    L = "L"
    ML = "mL"
    PIECE = "piece"


@dataclass(frozen=True)
class OtherUnit:
    """A unit token that is not part of the normalized set, kept verbatim."""

    value: str


class Category(str, Enum):
    """Built-in grocery categories, in taxonomy order."""

    FRUITS = "fruits"
    VEGETABLES = "vegetables"
    DAIRY = "dairy"
    MEAT = "meat"
    SEAFOOD = "seafood"
    BAKERY = "bakery"
    BEVERAGES = "beverages"
    SNACKS = "snacks"
    GRAINS = "grains"
    CONDIMENTS = "condiments"
    SPICES = "spices"
    CANNED = "canned"
    FROZEN = "frozen"
    OTHER = "other"


@dataclass(frozen=True)
class OtherCategory:
    """A category introduced by configuration rather than the built-in table."""

    value: str


UnitTag = Unit | OtherUnit
CategoryTag = Category | OtherCategory

# Spellings accepted for each normalized unit (lowercase).
UNIT_ALIASES: dict[str, Unit] = {
    "kg": Unit.KG,
    "kgs": Unit.KG,
    "kilo": Unit.KG,
    "kilos": Unit.KG,
    "kilogram": Unit.KG,
    "kilograms": Unit.KG,
    "g": Unit.G,
    "gr": Unit.G,
    "gram": Unit.G,
    "grams": Unit.G,
    "lb": Unit.LB,
    "lbs": Unit.LB,
    "pound": Unit.LB,
    "pounds": Unit.LB,
    "oz": Unit.OZ,
    "ounce": Unit.OZ,
    "ounces": Unit.OZ,
    "l": Unit.L,
    "liter": Unit.L,
    "liters": Unit.L,
    "litre": Unit.L,
    "litres": Unit.L,
    "ml": Unit.ML,
    "milliliter": Unit.ML,
    "milliliters": Unit.ML,
    "millilitre": Unit.ML,
    "millilitres": Unit.ML,
    "piece": Unit.PIECE,
    "pieces": Unit.PIECE,
    "pc": Unit.PIECE,
    "pcs": Unit.PIECE,
}


def normalize_unit(token: str | None) -> UnitTag:
    """Map a raw unit token to a normalized Unit, keeping unknown tokens as OtherUnit."""
    if not token or not token.strip():
        return Unit.PIECE
    raw = token.strip()
    return UNIT_ALIASES.get(raw.lower(), OtherUnit(raw))


@dataclass(frozen=True)
class PurchaseItem:
    """A single purchase extracted from a receipt line."""

    name: str
    quantity: Decimal = Decimal("1")
    unit: UnitTag = Unit.PIECE
    price: Decimal | None = None
    category: CategoryTag | None = None


@dataclass(frozen=True)
class ParsedReceipt:
    """Parsed receipt data."""

    raw_text: str  # Original OCR text, verbatim
    items: tuple[PurchaseItem, ...] = field(default_factory=tuple)
    total_amount: Decimal | None = None
    date: str | None = None  # Matched substring, not reformatted
    store_name: str | None = None
