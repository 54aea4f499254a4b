"""Format ParsedReceipt data for the review UI and the terminal."""

import json
import math
from decimal import Decimal
from typing import Any

from pantryscan.domain.receipt import ParsedReceipt, PurchaseItem


# Whole numbers with more digits than this are written as floats
MAX_INT_DIGITS = 15


def _json_amount(value: Decimal) -> float | str:
    """Render a Decimal as a JSON float, or as a string when no float can hold it."""
    number = float(value)
    if math.isfinite(number):
        return number
    return str(value)


def _json_number(value: Decimal) -> int | float | str:
    """Render a Decimal as a JSON number, keeping short whole numbers integral."""
    if value == value.to_integral_value() and value.adjusted() < MAX_INT_DIGITS:
        return int(value)
    return _json_amount(value)


def item_to_dict(item: PurchaseItem) -> dict[str, Any]:
    """Serialize one item using the client's field names; absent fields are omitted."""
    data: dict[str, Any] = {
        "name": item.name,
        "quantity": _json_number(item.quantity),
        "unit": item.unit.value,
    }
    if item.price is not None:
        data["price"] = _json_amount(item.price)
    if item.category is not None:
        data["category"] = item.category.value
    return data


def receipt_to_dict(receipt: ParsedReceipt) -> dict[str, Any]:
    """
    Serialize a receipt to the camelCase shape consumed by the batch-add review UI.

    ``items`` and ``rawText`` are always present; ``totalAmount``, ``date``
    and ``storeName`` appear only when they were extracted.
    """
    data: dict[str, Any] = {"items": [item_to_dict(item) for item in receipt.items]}
    if receipt.total_amount is not None:
        data["totalAmount"] = _json_amount(receipt.total_amount)
    if receipt.date is not None:
        data["date"] = receipt.date
    if receipt.store_name is not None:
        data["storeName"] = receipt.store_name
    data["rawText"] = receipt.raw_text
    return data


def receipt_to_json(receipt: ParsedReceipt, indent: int | None = 2) -> str:
    return json.dumps(receipt_to_dict(receipt), indent=indent, ensure_ascii=False)


def _format_quantity(item: PurchaseItem) -> str:
    quantity = item.quantity.normalize()
    if quantity == 1 and item.unit.value == "piece":
        return ""
    return f" x{quantity:f} {item.unit.value}"


def format_parsed_receipt(receipt: ParsedReceipt) -> str:
    """Render a receipt as a human-readable summary for review."""
    lines = [
        "=" * 60,
        "PARSED RECEIPT",
        "=" * 60,
        f"Store: {receipt.store_name or 'UNKNOWN'}",
        f"Date: {receipt.date or 'UNKNOWN'}",
    ]
    if receipt.total_amount is not None:
        lines.append(f"Total: ${receipt.total_amount:.2f}")
    else:
        lines.append("Total: UNKNOWN")

    lines.append(f"\nItems ({len(receipt.items)}):")
    for i, item in enumerate(receipt.items, 1):
        price_str = f" - ${item.price:.2f}" if item.price is not None else ""
        cat_str = f" [{item.category.value}]" if item.category is not None else ""
        lines.append(f"  {i}. {item.name}{_format_quantity(item)}{price_str}{cat_str}")
    lines.append("=" * 60)
    return "\n".join(lines)
