"""Pure domain types for receipt parsing."""

from pantryscan.domain.receipt import (
    Category,
    CategoryTag,
    OtherCategory,
    OtherUnit,
    ParsedReceipt,
    PurchaseItem,
    Unit,
    UnitTag,
    normalize_unit,
)

__all__ = [
    "Category",
    "CategoryTag",
    "OtherCategory",
    "OtherUnit",
    "ParsedReceipt",
    "PurchaseItem",
    "Unit",
    "UnitTag",
    "normalize_unit",
]
