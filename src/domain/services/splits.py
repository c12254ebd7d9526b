"""Split calculator: turn an expense total into per-participant shares."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import PERCENT_QUANTUM, PERCENT_TOTAL
from src.domain.errors import (
    DuplicateParticipant,
    EmptyParticipantSet,
    InvalidPercentageTotal,
    SplitMismatch,
    UnknownParticipant,
)
from src.domain.models import (
    EqualSplit,
    ExactAmountsSplit,
    ExpenseRecord,
    Money,
    PercentageSplit,
    SplitExpense,
    SplitPolicy,
)
from src.domain.policies.rounding import percentage_share
from src.utils.decimal_utils import coerce_decimal


def compute_shares(
    total: Money,
    policy: SplitPolicy,
    participant_ids: Sequence[str],
    *,
    expense_id: str | None = None,
) -> dict[str, Money]:
    """Compute each participant's share of an expense.

    The returned mapping follows the order of participant_ids and always
    sums to total exactly. Leftover cents are assigned in input order, so
    identical input always yields identical output.

    Args:
        total: Expense total.
        policy: Equal, exact-amounts, or percentage split.
        participant_ids: Ordered participants sharing the expense.
        expense_id: Optional expense identifier used in error messages.

    Returns:
        dict[str, Money]: Share per participant.

    Raises:
        EmptyParticipantSet: When participant_ids is empty.
        DuplicateParticipant: When a participant is listed twice.
        UnknownParticipant: When the policy names someone not listed.
        SplitMismatch: When exact amounts do not add up to total.
        InvalidPercentageTotal: When percentages are not a valid 100 total.
    """
    order = list(participant_ids)
    if not order:
        raise EmptyParticipantSet(expense_id)
    seen: set[str] = set()
    for participant_id in order:
        if participant_id in seen:
            raise DuplicateParticipant(participant_id)
        seen.add(participant_id)

    if isinstance(policy, EqualSplit):
        shares = _split_equal(total, order)
    elif isinstance(policy, ExactAmountsSplit):
        shares = _split_exact(total, policy.amounts, order)
    elif isinstance(policy, PercentageSplit):
        shares = _split_percentages(total, policy.percentages, order)
    else:
        raise TypeError(f"Unsupported split policy: {policy!r}")

    _check_conservation(total, shares)
    return shares


def split_expense(expense: ExpenseRecord) -> SplitExpense:
    """Compute the shares of a single expense record."""
    shares = compute_shares(
        expense.total,
        expense.policy,
        expense.participant_ids,
        expense_id=expense.expense_id,
    )
    return SplitExpense(expense=expense, shares=shares)


def split_expenses(expenses: Iterable[ExpenseRecord]) -> list[SplitExpense]:
    """Compute shares for every expense, preserving order."""
    return [split_expense(expense) for expense in expenses]


def _split_equal(total: Money, order: list[str]) -> dict[str, Money]:
    base, remainder = divmod(total.cents, len(order))
    return {
        participant_id: Money(base + 1 if index < remainder else base)
        for index, participant_id in enumerate(order)
    }


def _split_exact(
    total: Money,
    amounts: Mapping[str, Money],
    order: list[str],
) -> dict[str, Money]:
    for participant_id in amounts:
        if participant_id not in order:
            raise UnknownParticipant(participant_id)
    shares = {
        participant_id: amounts.get(participant_id, Money.zero())
        for participant_id in order
    }
    discrepancy = total - Money.total(shares.values())
    if not discrepancy.is_zero():
        raise SplitMismatch(discrepancy)
    return shares


def _split_percentages(
    total: Money,
    percentages: Mapping[str, Decimal],
    order: list[str],
) -> dict[str, Money]:
    for participant_id in percentages:
        if participant_id not in order:
            raise UnknownParticipant(participant_id)
    resolved = {
        participant_id: coerce_decimal(percentages.get(participant_id))
        for participant_id in order
    }
    percentage_total = sum(resolved.values(), Decimal("0"))
    for participant_id, percentage in resolved.items():
        if percentage < 0 or percentage > PERCENT_TOTAL:
            raise InvalidPercentageTotal(
                percentage_total,
                reason=f"{participant_id} has {percentage}",
            )
    if (
        percentage_total.quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)
        != PERCENT_TOTAL
    ):
        raise InvalidPercentageTotal(percentage_total)

    if total.is_negative():
        # Half-up rounds away from zero, so a refund mirrors the charge.
        return {
            participant_id: -share
            for participant_id, share in _allocate_percentages(
                -total, resolved, order
            ).items()
        }
    return _allocate_percentages(total, resolved, order)


def _allocate_percentages(
    total: Money,
    resolved: Mapping[str, Decimal],
    order: list[str],
) -> dict[str, Money]:
    """Round each percentage share of a non-negative total, then fix up.

    Leftover cents go one at a time, in input order, to participants with a
    non-zero percentage. When rounding overshoots, cents are taken back from
    shares that were rounded up, then from any positive share, so no share
    drops below zero.
    """
    shares = {
        participant_id: percentage_share(total, percentage)
        for participant_id, percentage in resolved.items()
    }
    leftover = (total - Money.total(shares.values())).cents
    if leftover > 0:
        candidates = [
            participant_id
            for participant_id in order
            if resolved[participant_id] > 0
        ]
        for index in range(leftover):
            participant_id = candidates[index % len(candidates)]
            shares[participant_id] = shares[participant_id] + Money(1)
    elif leftover < 0:
        _remove_cents(total, resolved, shares, -leftover, order)
    return shares


def _remove_cents(
    total: Money,
    resolved: Mapping[str, Decimal],
    shares: dict[str, Money],
    count: int,
    order: list[str],
) -> None:
    rounded_up = [
        participant_id
        for participant_id in order
        if Decimal(shares[participant_id].cents)
        > Decimal(total.cents) * resolved[participant_id] / PERCENT_TOTAL
    ]
    for participant_id in rounded_up[:count]:
        shares[participant_id] = shares[participant_id] - Money(1)
    count -= len(rounded_up[:count])
    while count:
        positive = [
            participant_id
            for participant_id in order
            if shares[participant_id].is_positive()
        ]
        for participant_id in positive[:count]:
            shares[participant_id] = shares[participant_id] - Money(1)
        count -= len(positive[:count])


def _check_conservation(total: Money, shares: Mapping[str, Money]) -> None:
    allocated = Money.total(shares.values())
    if allocated != total:
        raise AssertionError(
            f"Shares sum to {allocated.cents} instead of {total.cents}"
        )


__all__ = ["compute_shares", "split_expense", "split_expenses"]
