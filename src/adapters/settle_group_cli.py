"""CLI adapter printing balances and the settlement plan of a group."""

import os

from src.application.use_cases.get_group_balances import (
    GetGroupBalancesUseCase,
)
from src.application.use_cases.settle_group import SettleGroupUseCase
from src.domain.errors import LedgerError
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import describe_balance, format_cents


def main() -> None:
    """Print member balances and the transfers that settle the group."""
    logger = get_app_logger()
    group_id = os.getenv("LEDGER_GROUP_ID", "").strip()
    if not group_id:
        logger.warning("LEDGER_GROUP_ID is required to settle a group.")
        return

    settings = build_settings()
    repository = build_ledger_repository()
    get_usage_logger().info(f"settle_group_cli run for group={group_id}")

    try:
        view = GetGroupBalancesUseCase(
            ledger_repository=repository,
            logger=logger,
            default_currency=settings.default_currency,
        ).execute(group_id)
        plan = SettleGroupUseCase(
            ledger_repository=repository,
            logger=logger,
            exclude_unpaid=settings.exclude_unpaid,
            default_currency=settings.default_currency,
        ).execute(group_id)
    except LedgerError as exc:
        logger.error(f"Cannot settle group {group_id}: {exc}")
        return

    names = view.names
    currency = view.currency_code
    print(f"Group balances (group={group_id}, currency={currency})")
    for item in view.details:
        name = names.get(item.participant_id, item.participant_id)
        print(
            f"{name}: {describe_balance(item.net_balance.cents, currency)} "
            f"(paid={format_cents(item.total_paid.cents, currency)}, "
            f"share={format_cents(item.total_share.cents, currency)})"
        )
    if not view.unpaid_total.is_zero():
        print(
            "Expenses without payer: "
            f"{format_cents(view.unpaid_total.cents, currency)}"
        )

    if plan.is_settled:
        print("Everyone is settled up.")
        return
    print(f"Settlement plan ({len(plan.transfers)} transfers)")
    for transfer in plan.transfers:
        print(
            f"{names.get(transfer.from_id, transfer.from_id)} -> "
            f"{names.get(transfer.to_id, transfer.to_id)}: "
            f"{format_cents(transfer.amount.cents, currency)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
