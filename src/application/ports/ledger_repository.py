"""Application port for ledger data access."""

from typing import Protocol

from src.domain.models import ExpenseRecord, Participant


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to a group's roster and expenses.

    Implementations convert stored amounts to integer cents before
    returning records; use cases never see raw decimals.
    """

    def fetch_participants(self, group_id: str) -> list[Participant]:
        """Return the active members of a group in a stable order."""

    def fetch_expenses(self, group_id: str) -> list[ExpenseRecord]:
        """Return the non-deleted expenses of a group."""


__all__ = ["LedgerRepositoryPort"]
