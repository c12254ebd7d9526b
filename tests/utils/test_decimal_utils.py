"""Tests for boundary decimal helpers."""

from decimal import Decimal

from src.utils.decimal_utils import (
    cents_to_decimal,
    coerce_decimal,
    describe_balance,
    format_cents,
)


def test_coerce_decimal_normalizes_inputs() -> None:
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(Decimal("1.25")) == Decimal("1.25")
    assert coerce_decimal(0.1) == Decimal("0.1")
    assert coerce_decimal("33.34") == Decimal("33.34")


def test_cents_to_decimal_has_two_places() -> None:
    assert cents_to_decimal(1234) == Decimal("12.34")
    assert str(cents_to_decimal(5)) == "0.05"
    assert str(cents_to_decimal(-150)) == "-1.50"


def test_format_cents_groups_thousands() -> None:
    assert format_cents(123456, "USD") == "1,234.56 USD"


def test_describe_balance_wording() -> None:
    """Matches the group overlay wording for each sign."""
    assert describe_balance(1250, "USD") == "Is owed 12.50 USD"
    assert describe_balance(-300, "EUR") == "Owes 3.00 EUR"
    assert describe_balance(0, "USD") == "Settled up"
