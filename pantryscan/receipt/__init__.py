"""Receipt text parsing: OCR text in, ParsedReceipt out."""

from .parser import first_line_store_name, known_store_strategy, parse
from .taxonomy import CategoryTaxonomy, build_category_taxonomy, categorize_item

__all__ = [
    "CategoryTaxonomy",
    "build_category_taxonomy",
    "categorize_item",
    "first_line_store_name",
    "known_store_strategy",
    "parse",
]
