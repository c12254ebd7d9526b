"""Domain services package."""

from .balances import (
    balance_residual,
    compute_balances,
    compute_member_balance_details,
)
from .settlement import apply_transfers, settle
from .splits import compute_shares, split_expense, split_expenses

__all__ = [
    "compute_shares",
    "split_expense",
    "split_expenses",
    "compute_member_balance_details",
    "compute_balances",
    "balance_residual",
    "settle",
    "apply_transfers",
]
