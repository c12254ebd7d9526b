"""Domain models package."""

from .ledger import (
    Balance,
    EqualSplit,
    ExactAmountsSplit,
    ExpenseRecord,
    MemberBalanceDetails,
    Participant,
    PercentageSplit,
    SplitExpense,
    SplitPolicy,
    Transfer,
)
from .money import Money

__all__ = [
    "Money",
    "Participant",
    "EqualSplit",
    "ExactAmountsSplit",
    "PercentageSplit",
    "SplitPolicy",
    "ExpenseRecord",
    "SplitExpense",
    "Balance",
    "MemberBalanceDetails",
    "Transfer",
]
