"""Use case to build a settlement plan for an expense group."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.currency import resolve_currency
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import LedgerError
from src.domain.models import Transfer
from src.domain.services import (
    apply_transfers,
    compute_balances,
    settle,
    split_expenses,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SettlementPlan:
    """Transfers that settle a group.

    Attributes:
        group_id: Group the plan belongs to.
        currency_code: Currency of every transfer amount.
        transfers: Ordered transfers from debtor to creditor.
        excluded_expense_ids: Expenses left out because they have no payer.
    """

    group_id: str
    currency_code: str
    transfers: list[Transfer]
    excluded_expense_ids: tuple[str, ...] = ()

    @property
    def is_settled(self) -> bool:
        """Return True when nobody owes anything."""
        return not self.transfers


class SettleGroupUseCase:
    """Compute the transfers that bring every member of a group to zero."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        exclude_unpaid: bool = True,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the roster and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            exclude_unpaid: Leave expenses without a payer out of the plan.
                When False, such expenses make settlement fail with
                UnbalancedInput.
            default_currency: Currency reported for groups without expenses.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._exclude_unpaid = exclude_unpaid
        self._default_currency = default_currency

    def execute(self, group_id: str) -> SettlementPlan:
        """Return the settlement plan for a group.

        Args:
            group_id: Identifier of the expense group.

        Returns:
            SettlementPlan: Transfers in matching order.

        Raises:
            LedgerError: When the group's data cannot be settled.
        """
        participants = self._ledger_repository.fetch_participants(group_id)
        expenses = self._ledger_repository.fetch_expenses(group_id)
        currency_code = resolve_currency(expenses, self._default_currency)

        excluded: tuple[str, ...] = ()
        if self._exclude_unpaid:
            excluded = tuple(
                expense.expense_id
                for expense in expenses
                if expense.payer_id is None
            )
            expenses = [
                expense for expense in expenses if expense.payer_id is not None
            ]
        if excluded:
            self._logger.warning(
                f"Excluding {len(excluded)} expense(s) without payer "
                f"from settlement of group={group_id}"
            )

        try:
            balances = compute_balances(split_expenses(expenses), participants)
            transfers = settle(balances)
        except LedgerError as exc:
            self._logger.error(f"Settlement failed for group={group_id}: {exc}")
            raise

        leftover = apply_transfers(balances, transfers)
        unsettled = [
            participant_id
            for participant_id, amount in leftover.items()
            if not amount.is_zero()
        ]
        if unsettled:
            raise AssertionError(
                f"Settlement plan leaves balances for {', '.join(unsettled)}"
            )

        self._logger.info(
            f"Settlement computed for group={group_id}: "
            f"transfers={len(transfers)}"
        )
        return SettlementPlan(
            group_id=group_id,
            currency_code=currency_code,
            transfers=transfers,
            excluded_expense_ids=excluded,
        )


__all__ = ["SettleGroupUseCase", "SettlementPlan"]
