"""Validation errors raised by the ledger engine.

Each error carries the data needed to build an actionable message in the
calling layer. They are input-validation failures: nothing here is
transient, so callers should report them rather than retry.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.money import Money


class LedgerError(ValueError):
    """Base class for every engine validation failure."""


class EmptyParticipantSet(LedgerError):
    """An expense was split among nobody."""

    def __init__(self, expense_id: str | None = None) -> None:
        self.expense_id = expense_id
        label = f" for expense {expense_id}" if expense_id else ""
        super().__init__(f"No participants to split{label}")


class UnknownParticipant(LedgerError):
    """A split policy references a participant outside the expense."""

    def __init__(self, participant_id: str) -> None:
        self.participant_id = participant_id
        super().__init__(
            f"Participant {participant_id} is not part of the expense"
        )


class DuplicateParticipant(LedgerError):
    """The same participant was listed twice for one expense."""

    def __init__(self, participant_id: str) -> None:
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} is listed twice")


class SplitMismatch(LedgerError):
    """Exact amounts do not add up to the expense total.

    Attributes:
        discrepancy: Expense total minus the sum of the supplied amounts.
    """

    def __init__(self, discrepancy: Money) -> None:
        self.discrepancy = discrepancy
        super().__init__(
            f"Exact amounts differ from the total by {discrepancy.cents} cents"
        )


class InvalidPercentageTotal(LedgerError):
    """Percentages do not total 100 or one of them is out of range."""

    def __init__(self, percentage_total: Decimal, reason: str = "") -> None:
        self.percentage_total = percentage_total
        message = f"Percentages must total 100, got {percentage_total}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParticipantNotInRoster(LedgerError):
    """An expense references someone outside the group roster."""

    def __init__(
        self,
        participant_id: str,
        expense_id: str | None = None,
    ) -> None:
        self.participant_id = participant_id
        self.expense_id = expense_id
        super().__init__(
            f"Participant {participant_id} from expense {expense_id} "
            "is not in the roster"
        )


class UnbalancedInput(LedgerError):
    """Balances handed to settlement do not sum to zero.

    Attributes:
        residual: Sum of all input balances.
    """

    def __init__(self, residual: Money) -> None:
        self.residual = residual
        super().__init__(
            f"Balances must sum to zero, residual is {residual.cents} cents"
        )


class MixedCurrencies(LedgerError):
    """A group holds expenses in more than one currency."""

    def __init__(self, currency_codes: Iterable[str]) -> None:
        self.currency_codes = tuple(sorted(set(currency_codes)))
        super().__init__(
            "Expenses use several currencies: "
            f"{', '.join(self.currency_codes)}"
        )


__all__ = [
    "LedgerError",
    "EmptyParticipantSet",
    "UnknownParticipant",
    "DuplicateParticipant",
    "SplitMismatch",
    "InvalidPercentageTotal",
    "ParticipantNotInRoster",
    "UnbalancedInput",
    "MixedCurrencies",
]
