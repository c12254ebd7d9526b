"""Settlement minimizer: reduce net balances to point-to-point transfers."""

import heapq
from collections.abc import Iterable, Mapping

from src.domain.errors import UnbalancedInput
from src.domain.models import Balance, Money, Transfer
from src.domain.services.balances import balance_residual


def settle(balances: Mapping[str, Balance]) -> list[Transfer]:
    """Build a settlement plan with greedy largest-first matching.

    The largest creditor is repeatedly paired with the largest debtor and
    the smaller of the two magnitudes is transferred. Whoever reaches zero
    drops out; the other goes back into its heap with the remaining amount.
    Ties on magnitude go to the lexicographically smallest participant id.

    The plan is deterministic and has at most (non-zero balances - 1)
    transfers. It is not guaranteed to be the global minimum.

    Args:
        balances: Balance per participant id. Must sum to zero.

    Returns:
        list[Transfer]: Transfers in the order they were matched.

    Raises:
        UnbalancedInput: When balances do not sum to zero.
    """
    residual = balance_residual(balances)
    if not residual.is_zero():
        raise UnbalancedInput(residual)

    # Heaps hold (-magnitude, participant_id) to pop the largest first.
    creditors: list[tuple[int, str]] = []
    debtors: list[tuple[int, str]] = []
    for balance in balances.values():
        cents = balance.amount.cents
        if cents > 0:
            creditors.append((-cents, balance.participant_id))
        elif cents < 0:
            debtors.append((cents, balance.participant_id))
    heapq.heapify(creditors)
    heapq.heapify(debtors)

    transfers: list[Transfer] = []
    while creditors and debtors:
        credit, creditor_id = heapq.heappop(creditors)
        debt, debtor_id = heapq.heappop(debtors)
        amount = min(-credit, -debt)
        transfers.append(
            Transfer(from_id=debtor_id, to_id=creditor_id, amount=Money(amount))
        )
        if -credit > amount:
            heapq.heappush(creditors, (credit + amount, creditor_id))
        if -debt > amount:
            heapq.heappush(debtors, (debt + amount, debtor_id))
    return transfers


def apply_transfers(
    balances: Mapping[str, Balance],
    transfers: Iterable[Transfer],
) -> dict[str, Money]:
    """Replay a settlement plan against balances.

    Paying moves the debtor up and the creditor down, so a correct plan
    leaves every participant at zero.

    Args:
        balances: Original balances per participant id.
        transfers: Plan to apply.

    Returns:
        dict[str, Money]: Remaining amount per participant id.
    """
    remaining = {
        participant_id: balance.amount
        for participant_id, balance in balances.items()
    }
    for transfer in transfers:
        remaining[transfer.from_id] = (
            remaining.get(transfer.from_id, Money.zero()) + transfer.amount
        )
        remaining[transfer.to_id] = (
            remaining.get(transfer.to_id, Money.zero()) - transfer.amount
        )
    return remaining


__all__ = ["settle", "apply_transfers"]
