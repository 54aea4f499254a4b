from decimal import Decimal

import pytest

from pantryscan.receipt.line_classifier import (
    CLASSIFICATION_RULES,
    LineKind,
    classify_line,
    is_noise,
)


@pytest.mark.parametrize("line", ["ab", "$1", "#"])
def test_short_lines_are_noise(line: str) -> None:
    assert classify_line(line).kind is LineKind.NOISE


@pytest.mark.parametrize("line", ["12.99", "$ 4.50", "*****", "05/12/2024", "€ 3,50", "1234 5678"])
def test_digit_and_symbol_lines_are_noise(line: str) -> None:
    assert classify_line(line).kind is LineKind.NOISE


def test_total_line_carries_amount() -> None:
    result = classify_line("TOTAL 45.67")
    assert result.kind is LineKind.TOTAL
    assert result.amount == Decimal("45.67")


def test_total_amount_drops_thousands_separators() -> None:
    result = classify_line("Total: $1,234.56")
    assert result.kind is LineKind.TOTAL
    assert result.amount == Decimal("1234.56")


def test_total_line_without_number_has_no_amount() -> None:
    result = classify_line("TOTAL")
    assert result.kind is LineKind.TOTAL
    assert result.amount is None


def test_subtotal_is_noise_not_total() -> None:
    assert classify_line("SUBTOTAL 40.00").kind is LineKind.NOISE


def test_total_rule_beats_grocery_keyword() -> None:
    assert classify_line("TOTAL MILK 3.00").kind is LineKind.TOTAL


@pytest.mark.parametrize(
    "line",
    ["THANK YOU FOR SHOPPING", "CASH 20.00", "CHANGE 4.33", "VISA CARD ****1234", "TAX 1.30"],
)
def test_noise_word_lines_are_noise(line: str) -> None:
    assert classify_line(line).kind is LineKind.NOISE


def test_grocery_keyword_overrides_noise_word() -> None:
    assert classify_line("CREDIT CARD MILK 2.99").kind is LineKind.CANDIDATE


def test_noise_words_match_inside_longer_words() -> None:
    # "cash" inside "cashews", and no grocery keyword to override it.
    assert classify_line("Cashews 5.99").kind is LineKind.NOISE


@pytest.mark.parametrize("line", ["Milk 2.99", "abc", "Bananas 1.5 kg 3.50", "FRESHMART"])
def test_other_lines_are_candidates(line: str) -> None:
    result = classify_line(line)
    assert result.kind is LineKind.CANDIDATE
    assert result.amount is None


def test_rule_order() -> None:
    assert [name for name, _, _ in CLASSIFICATION_RULES] == [
        "too_short",
        "symbols_only",
        "total_line",
        "noise_word",
    ]


def test_is_noise_strips_before_classifying() -> None:
    assert is_noise("  CASH ")
    assert not is_noise(" Milk ")


def test_grocery_keywords_match_inside_longer_words() -> None:
    # "rice" inside "price" overrides the noise word "card".
    assert classify_line("PRICE CARD 2.00").kind is LineKind.CANDIDATE


def test_spaced_sub_total_is_a_total_line() -> None:
    result = classify_line("SUB TOTAL 40.00")
    assert result.kind is LineKind.TOTAL
    assert result.amount == Decimal("40.00")
