"""Currency helpers for group-level use cases."""

from collections.abc import Iterable

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import MixedCurrencies
from src.domain.models import ExpenseRecord


def resolve_currency(
    expenses: Iterable[ExpenseRecord],
    default_currency: str = DEFAULT_CURRENCY,
) -> str:
    """Return the single currency used by a group's expenses.

    Amounts are never converted between currencies, so a group mixing
    currencies cannot be balanced.

    Args:
        expenses: Expense records of the group.
        default_currency: Currency reported when there are no expenses.

    Returns:
        str: The shared currency code.

    Raises:
        MixedCurrencies: When more than one currency code is present.
    """
    codes = {expense.currency_code for expense in expenses}
    if not codes:
        return default_currency
    if len(codes) > 1:
        raise MixedCurrencies(codes)
    return codes.pop()


__all__ = ["resolve_currency"]
