"""Domain package for ledger rules and core models."""

from .constants import DEFAULT_CURRENCY, PERCENT_QUANTUM, PERCENT_TOTAL
from .models import (
    Balance,
    EqualSplit,
    ExactAmountsSplit,
    ExpenseRecord,
    MemberBalanceDetails,
    Money,
    Participant,
    PercentageSplit,
    SplitExpense,
    SplitPolicy,
    Transfer,
)
from .errors import (
    DuplicateParticipant,
    EmptyParticipantSet,
    InvalidPercentageTotal,
    LedgerError,
    MixedCurrencies,
    ParticipantNotInRoster,
    SplitMismatch,
    UnbalancedInput,
    UnknownParticipant,
)
from .policies import percentage_share, round_half_up
from .services import (
    apply_transfers,
    balance_residual,
    compute_balances,
    compute_member_balance_details,
    compute_shares,
    settle,
    split_expense,
    split_expenses,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "PERCENT_QUANTUM",
    "PERCENT_TOTAL",
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
    "LedgerError",
    "EmptyParticipantSet",
    "UnknownParticipant",
    "DuplicateParticipant",
    "SplitMismatch",
    "InvalidPercentageTotal",
    "ParticipantNotInRoster",
    "UnbalancedInput",
    "MixedCurrencies",
    "round_half_up",
    "percentage_share",
    "compute_shares",
    "split_expense",
    "split_expenses",
    "compute_member_balance_details",
    "compute_balances",
    "balance_residual",
    "settle",
    "apply_transfers",
]
