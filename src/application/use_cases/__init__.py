"""Application use cases package."""

from .currency import resolve_currency
from .get_group_balances import GetGroupBalancesUseCase, GroupBalancesView
from .settle_group import SettleGroupUseCase, SettlementPlan

__all__ = [
    "resolve_currency",
    "GetGroupBalancesUseCase",
    "GroupBalancesView",
    "SettleGroupUseCase",
    "SettlementPlan",
]
