"""Balance aggregation over split expenses."""

from collections.abc import Iterable, Mapping

from src.domain.errors import ParticipantNotInRoster
from src.domain.models import (
    Balance,
    ExpenseRecord,
    MemberBalanceDetails,
    Money,
    Participant,
)

SplitPair = tuple[ExpenseRecord, Mapping[str, Money]]


def compute_member_balance_details(
    expenses: Iterable[SplitPair],
    roster: Iterable[str | Participant],
) -> list[MemberBalanceDetails]:
    """Compute paid and owed totals per roster member.

    The payer of an expense is credited with its full total; every share
    recipient is debited with their share. The payer's own share nets out
    automatically.

    Args:
        expenses: Pairs of expense record and computed shares. SplitExpense
            instances unpack the same way.
        roster: Participant ids (or Participant objects) of the group.

    Returns:
        list[MemberBalanceDetails]: One entry per roster member, in roster
        order.

    Raises:
        ParticipantNotInRoster: When a payer or share recipient is not in
            the roster. No partial result is returned.
    """
    members = _roster_ids(roster)
    paid = {participant_id: 0 for participant_id in members}
    owed = {participant_id: 0 for participant_id in members}

    for expense, shares in expenses:
        if expense.payer_id is not None:
            if expense.payer_id not in paid:
                raise ParticipantNotInRoster(
                    expense.payer_id,
                    expense.expense_id,
                )
            paid[expense.payer_id] += expense.total.cents
        for participant_id, share in shares.items():
            if participant_id not in owed:
                raise ParticipantNotInRoster(
                    participant_id,
                    expense.expense_id,
                )
            owed[participant_id] += share.cents

    return [
        MemberBalanceDetails(
            participant_id=participant_id,
            total_paid=Money(paid[participant_id]),
            total_share=Money(owed[participant_id]),
        )
        for participant_id in members
    ]


def compute_balances(
    expenses: Iterable[SplitPair],
    roster: Iterable[str | Participant],
) -> dict[str, Balance]:
    """Compute the signed net balance of every roster member.

    Balances sum to zero when every expense has a payer. An expense without
    a payer is a pure debit, which leaves a negative residual equal to its
    total; use balance_residual to detect it.

    Args:
        expenses: Pairs of expense record and computed shares.
        roster: Participant ids (or Participant objects) of the group.

    Returns:
        dict[str, Balance]: Balance per participant id, in roster order.
    """
    details = compute_member_balance_details(expenses, roster)
    return {
        item.participant_id: Balance(
            participant_id=item.participant_id,
            amount=item.net_balance,
        )
        for item in details
    }


def balance_residual(balances: Mapping[str, Balance]) -> Money:
    """Return the sum of all balances (zero for a conserved set)."""
    return Money.total(balance.amount for balance in balances.values())


def _roster_ids(roster: Iterable[str | Participant]) -> list[str]:
    members: list[str] = []
    seen: set[str] = set()
    for member in roster:
        participant_id = (
            member.participant_id
            if isinstance(member, Participant)
            else member
        )
        if participant_id in seen:
            continue
        seen.add(participant_id)
        members.append(participant_id)
    return members


__all__ = [
    "compute_member_balance_details",
    "compute_balances",
    "balance_residual",
]
