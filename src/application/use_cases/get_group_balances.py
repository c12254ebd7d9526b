"""Use case to compute member balances for an expense group."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.currency import resolve_currency
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    Balance,
    MemberBalanceDetails,
    Money,
    Participant,
)
from src.domain.services import (
    balance_residual,
    compute_member_balance_details,
    split_expenses,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class GroupBalancesView:
    """Balances of a group ready for rendering.

    Attributes:
        group_id: Group the balances belong to.
        currency_code: Currency shared by the group's expenses.
        participants: Group roster in display order.
        details: Paid and share totals per member.
        balances: Net balance per participant id.
        unpaid_total: Total of expenses with no recorded payer.
    """

    group_id: str
    currency_code: str
    participants: list[Participant]
    details: list[MemberBalanceDetails]
    balances: dict[str, Balance]
    unpaid_total: Money

    @property
    def names(self) -> dict[str, str]:
        """Return display names keyed by participant id."""
        return {
            participant.participant_id: participant.display_name
            for participant in self.participants
        }


class GetGroupBalancesUseCase:
    """Compute paid, share, and net balance per group member."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the roster and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            default_currency: Currency reported for groups without expenses.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._default_currency = default_currency

    def execute(self, group_id: str) -> GroupBalancesView:
        """Return the balances view for a group.

        Args:
            group_id: Identifier of the expense group.

        Returns:
            GroupBalancesView: Per-member totals and net balances.
        """
        participants = self._ledger_repository.fetch_participants(group_id)
        expenses = self._ledger_repository.fetch_expenses(group_id)
        currency_code = resolve_currency(expenses, self._default_currency)

        split = split_expenses(expenses)
        details = compute_member_balance_details(split, participants)
        balances = {
            item.participant_id: Balance(
                participant_id=item.participant_id,
                amount=item.net_balance,
            )
            for item in details
        }
        unpaid_total = Money.total(
            expense.total for expense in expenses if expense.payer_id is None
        )
        residual = balance_residual(balances)
        if residual != -unpaid_total:
            raise AssertionError(
                f"Balance residual {residual.cents} does not match "
                f"unpaid total {unpaid_total.cents}"
            )

        self._logger.info(
            f"Balances computed for group={group_id}: "
            f"members={len(participants)}, expenses={len(expenses)}, "
            f"unpaid_total={unpaid_total.cents}"
        )
        return GroupBalancesView(
            group_id=group_id,
            currency_code=currency_code,
            participants=list(participants),
            details=details,
            balances=balances,
            unpaid_total=unpaid_total,
        )


__all__ = ["GetGroupBalancesUseCase", "GroupBalancesView"]
