"""Rounding policy for percentage-based shares.

Percentage shares round half away from zero (ROUND_HALF_UP in the decimal
module). The split calculator then moves leftover cents so that shares
always add back up to the expense total.
"""

from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import PERCENT_TOTAL
from src.domain.models.money import Money


def round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, halves away from zero.

    Args:
        value: Exact decimal value.

    Returns:
        int: Rounded integer.
    """
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def percentage_share(total: Money, percentage: Decimal) -> Money:
    """Return the rounded share of total for a percentage.

    Args:
        total: Expense total.
        percentage: Percentage between 0 and 100.

    Returns:
        Money: total * percentage / 100, rounded half up.
    """
    exact = Decimal(total.cents) * percentage / PERCENT_TOTAL
    return Money(round_half_up(exact))


__all__ = ["round_half_up", "percentage_share"]
