"""Domain records for expenses, balances, and settlement plans."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from .money import Money


@dataclass(frozen=True)
class Participant:
    """Person taking part in a group's expenses.

    Attributes:
        participant_id: Opaque identifier used throughout the engine.
        display_name: Human readable name for adapters.
    """

    participant_id: str
    display_name: str


@dataclass(frozen=True)
class EqualSplit:
    """Divide the total evenly, leftover cents go to the first participants."""


@dataclass(frozen=True)
class ExactAmountsSplit:
    """Caller-asserted amount per participant.

    Attributes:
        amounts: Mapping of participant id to the exact share.
    """

    amounts: Mapping[str, Money] = field(default_factory=dict)


@dataclass(frozen=True)
class PercentageSplit:
    """Percentage per participant, between 0 and 100.

    Attributes:
        percentages: Mapping of participant id to a Decimal percentage.
    """

    percentages: Mapping[str, Decimal] = field(default_factory=dict)


SplitPolicy = Union[EqualSplit, ExactAmountsSplit, PercentageSplit]


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense as supplied by the persistence layer.

    Attributes:
        expense_id: Identifier of the expense.
        total: Full amount of the expense.
        payer_id: Participant who fronted the money, if recorded.
        policy: Rule used to split the total.
        participant_ids: Ordered participants sharing the expense.
        currency_code: ISO currency code carried as metadata.
        description: Free-form label.
    """

    expense_id: str
    total: Money
    payer_id: str | None
    policy: SplitPolicy
    participant_ids: tuple[str, ...]
    currency_code: str = "USD"
    description: str = ""


@dataclass(frozen=True)
class SplitExpense:
    """Expense paired with its computed per-participant shares."""

    expense: ExpenseRecord
    shares: Mapping[str, Money]

    def __iter__(self) -> Iterator[object]:
        # Unpacks like an (expense, shares) pair.
        yield self.expense
        yield self.shares


@dataclass(frozen=True)
class Balance:
    """Signed net position of a participant.

    Attributes:
        participant_id: Participant the balance belongs to.
        amount: Positive when the participant is owed, negative when they owe.
    """

    participant_id: str
    amount: Money

    @property
    def is_owed(self) -> bool:
        return self.amount.is_positive()

    @property
    def owes(self) -> bool:
        return self.amount.is_negative()

    @property
    def is_settled(self) -> bool:
        return self.amount.is_zero()


@dataclass(frozen=True)
class MemberBalanceDetails:
    """Paid and owed totals for a single participant.

    Attributes:
        participant_id: Participant the totals belong to.
        total_paid: Sum of expense totals fronted by the participant.
        total_share: Sum of the participant's computed shares.
    """

    participant_id: str
    total_paid: Money
    total_share: Money

    @property
    def net_balance(self) -> Money:
        """Return total_paid minus total_share."""
        return self.total_paid - self.total_share


@dataclass(frozen=True)
class Transfer:
    """Single payment from a debtor to a creditor."""

    from_id: str
    to_id: str
    amount: Money

    def __post_init__(self) -> None:
        if not self.amount.is_positive():
            raise ValueError(
                f"Transfer amount must be positive, got {self.amount.cents}"
            )


__all__ = [
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
