"""Helpers for Decimal normalization and cent formatting at the boundaries.

The ledger engine only handles integer cents. Amounts are stored as cents,
so the only conversions here are raw SQL numerics to Decimal (percentages)
and cents back to a display string when results are rendered.
"""

from decimal import Decimal

CENT = Decimal("0.01")
CENTS_PER_UNIT = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def cents_to_decimal(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal in major units."""
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(CENT)


def format_cents(cents: int, currency_code: str) -> str:
    """Format cents for display, e.g. 123456 -> '1,234.56 USD'."""
    return f"{cents_to_decimal(cents):,.2f} {currency_code}"


def describe_balance(cents: int, currency_code: str) -> str:
    """Describe a signed balance in plain words.

    Args:
        cents: Signed balance in cents (positive means the member is owed).
        currency_code: Currency shown next to the amount.

    Returns:
        str: "Is owed ...", "Owes ..." or "Settled up".
    """
    if cents > 0:
        return f"Is owed {format_cents(cents, currency_code)}"
    if cents < 0:
        return f"Owes {format_cents(-cents, currency_code)}"
    return "Settled up"


__all__ = [
    "coerce_decimal",
    "cents_to_decimal",
    "format_cents",
    "describe_balance",
]
