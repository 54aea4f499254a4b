"""Grocery receipt parsing: OCR text to structured purchase items."""

from pantryscan.domain.receipt import (
    Category,
    OtherCategory,
    OtherUnit,
    ParsedReceipt,
    PurchaseItem,
    Unit,
)
from pantryscan.receipt.parser import parse

__all__ = [
    "Category",
    "OtherCategory",
    "OtherUnit",
    "ParsedReceipt",
    "PurchaseItem",
    "Unit",
    "parse",
]
