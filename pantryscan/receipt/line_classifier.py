"""Classify normalized receipt lines as noise, total lines, or item candidates."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

MIN_LINE_LENGTH = 3

# Greeting/payment/summary vocabulary. Matched as lowercase substrings.
NOISE_WORDS: tuple[str, ...] = (
    "total",
    "subtotal",
    "tax",
    "thank",
    "you",
    "receipt",
    "store",
    "cashier",
    "transaction",
    "credit",
    "debit",
    "card",
    "change",
    "cash",
    "payment",
    "balance",
)

# Grocery vocabulary. A line carrying one of these is never dismissed as noise,
# and the keyword fallback pass only looks at lines that contain one.
GROCERY_KEYWORDS: tuple[str, ...] = (
    "milk",
    "bread",
    "eggs",
    "cheese",
    "butter",
    "yogurt",
    "chicken",
    "beef",
    "pork",
    "fish",
    "salmon",
    "apple",
    "banana",
    "orange",
    "tomato",
    "potato",
    "onion",
    "rice",
    "pasta",
    "cereal",
    "flour",
    "sugar",
    "salt",
    "coffee",
    "tea",
    "juice",
    "water",
    "soda",
    "chips",
    "cookies",
    "crackers",
    "snack",
)

# Digits, whitespace, punctuation and currency symbols only.
SYMBOLS_ONLY = re.compile(r"^[\d\W_]+$")

# First number on a total line; commas are thousands separators here.
TOTAL_AMOUNT = re.compile(r"\d[\d,]*(?:\.\d+)?")


class LineKind(Enum):
    NOISE = "noise"
    TOTAL = "total"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class LineClassification:
    """Result of classifying one line."""

    kind: LineKind
    # Only set for TOTAL lines that carry a number.
    amount: Decimal | None = None


def to_decimal(token: str) -> Decimal | None:
    """Convert a numeric token to Decimal, returning None if it is not a number."""
    try:
        value = Decimal(token)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def contains_grocery_keyword(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in GROCERY_KEYWORDS)


def _contains_noise_word(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in NOISE_WORDS)


def _is_too_short(line: str) -> bool:
    return len(line) < MIN_LINE_LENGTH


def _is_symbols_only(line: str) -> bool:
    return SYMBOLS_ONLY.match(line) is not None


def _is_total_line(line: str) -> bool:
    lowered = line.lower()
    return "total" in lowered and "subtotal" not in lowered


def _is_noise_without_keyword(line: str) -> bool:
    return _contains_noise_word(line) and not contains_grocery_keyword(line)


def _extract_total_amount(line: str) -> Decimal | None:
    """Return the first number on a total line, with thousands separators removed."""
    match = TOTAL_AMOUNT.search(line)
    if not match:
        return None
    return to_decimal(match.group(0).replace(",", ""))


def _noise(_line: str) -> LineClassification:
    return LineClassification(LineKind.NOISE)


def _total(line: str) -> LineClassification:
    return LineClassification(LineKind.TOTAL, amount=_extract_total_amount(line))


# Evaluated top to bottom; the first predicate that holds decides the line.
# The total rule sits above the noise-word rule because "total" is itself a
# noise word.
CLASSIFICATION_RULES: tuple[tuple[str, Callable[[str], bool], Callable[[str], LineClassification]], ...] = (
    ("too_short", _is_too_short, _noise),
    ("symbols_only", _is_symbols_only, _noise),
    ("total_line", _is_total_line, _total),
    ("noise_word", _is_noise_without_keyword, _noise),
)


def classify_line(line: str) -> LineClassification:
    """
    Classify a trimmed, non-empty receipt line.

    Args:
        line: One normalized line of OCR text

    Returns:
        LineClassification with kind NOISE, TOTAL (plus the amount if any),
        or CANDIDATE
    """
    for _name, predicate, build in CLASSIFICATION_RULES:
        if predicate(line):
            return build(line)
    return LineClassification(LineKind.CANDIDATE)


def is_noise(text: str) -> bool:
    """Return True if text on its own would be classified as noise."""
    return classify_line(text.strip()).kind is LineKind.NOISE
