from decimal import Decimal

import pytest

from pantryscan.domain.receipt import Category, PurchaseItem, Unit
from pantryscan.receipt.fallback import extract_keyword_items


def test_keyword_line_with_glued_price() -> None:
    assert extract_keyword_items(["BANANA@0.59"]) == [
        PurchaseItem(
            name="BANANA",
            quantity=Decimal("1"),
            unit=Unit.PIECE,
            price=Decimal("0.59"),
            category=Category.FRUITS,
        )
    ]


def test_keyword_line_without_price() -> None:
    items = extract_keyword_items(["FRESH MILK"])
    assert len(items) == 1
    assert items[0].name == "FRESH MILK"
    assert items[0].price is None
    assert items[0].category == Category.DAIRY


def test_comma_decimal_price() -> None:
    items = extract_keyword_items(["ORANGE-2,49"])
    assert [(item.name, item.price) for item in items] == [("ORANGE", Decimal("2.49"))]


def test_lines_without_grocery_keywords_are_ignored() -> None:
    assert extract_keyword_items(["ACME FOODS", "VISA ****1234", "THANK YOU"]) == []


def test_total_lines_are_never_items() -> None:
    assert extract_keyword_items(["TOTAL MILK 3.00"]) == []


def test_noise_word_is_kept_when_keyword_present() -> None:
    items = extract_keyword_items(["CASH BACK BREAD"])
    assert [item.name for item in items] == ["CASH BACK BREAD"]


def test_keeps_line_order() -> None:
    items = extract_keyword_items(["RICE#4.10", "ACME", "COFFEE*7.99"])
    assert [item.name for item in items] == ["RICE", "COFFEE"]
    assert [item.price for item in items] == [Decimal("4.10"), Decimal("7.99")]


@pytest.mark.parametrize("line", ["BANANA@0.59 H", "BANANA@$0.59T", "BANANA @ 0.59 j"])
def test_tax_flag_after_price_is_dropped(line: str) -> None:
    items = extract_keyword_items([line])
    assert [(item.name, item.price) for item in items] == [("BANANA", Decimal("0.59"))]


def test_long_separator_runs_are_stripped() -> None:
    items = extract_keyword_items(["BREAD" + " -" * 5000 + " 2.49"])
    assert [(item.name, item.price) for item in items] == [("BREAD", Decimal("2.49"))]
