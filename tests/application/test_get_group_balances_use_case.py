"""Tests for the GetGroupBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_group_balances import (
    GetGroupBalancesUseCase,
)
from src.domain.errors import MixedCurrencies, ParticipantNotInRoster
from src.domain.models import (
    EqualSplit,
    ExpenseRecord,
    Money,
    Participant,
    PercentageSplit,
)


def _repository(participants, expenses) -> MagicMock:
    repository = MagicMock()
    repository.fetch_participants.return_value = participants
    repository.fetch_expenses.return_value = expenses
    return repository


def _roster() -> list[Participant]:
    return [
        Participant("a", "Alice"),
        Participant("b", "Bob"),
        Participant("c", "Carol"),
    ]


def test_execute_returns_details_and_balances() -> None:
    """Use case should split expenses and aggregate per member."""
    expenses = [
        ExpenseRecord(
            expense_id="dinner",
            total=Money(9000),
            payer_id="a",
            policy=EqualSplit(),
            participant_ids=("a", "b", "c"),
            currency_code="EUR",
        ),
        ExpenseRecord(
            expense_id="taxi",
            total=Money(2000),
            payer_id="b",
            policy=PercentageSplit({"b": Decimal("25"), "c": Decimal("75")}),
            participant_ids=("b", "c"),
            currency_code="EUR",
        ),
    ]
    repository = _repository(_roster(), expenses)
    logger = MagicMock()

    use_case = GetGroupBalancesUseCase(
        ledger_repository=repository,
        logger=logger,
    )

    view = use_case.execute("trip")

    assert view.group_id == "trip"
    assert view.currency_code == "EUR"
    assert {pid: b.amount.cents for pid, b in view.balances.items()} == {
        "a": 6000,
        "b": -1500,
        "c": -4500,
    }
    assert [item.total_paid.cents for item in view.details] == [9000, 2000, 0]
    assert view.unpaid_total == Money(0)
    assert view.names == {"a": "Alice", "b": "Bob", "c": "Carol"}
    repository.fetch_participants.assert_called_once_with("trip")
    repository.fetch_expenses.assert_called_once_with("trip")
    logger.info.assert_called_once()


def test_execute_reports_unpaid_total() -> None:
    expenses = [
        ExpenseRecord(
            expense_id="groceries",
            total=Money(300),
            payer_id=None,
            policy=EqualSplit(),
            participant_ids=("a", "b", "c"),
        ),
    ]
    use_case = GetGroupBalancesUseCase(
        ledger_repository=_repository(_roster(), expenses),
        logger=MagicMock(),
    )

    view = use_case.execute("home")

    assert view.unpaid_total == Money(300)
    assert view.currency_code == "USD"
    assert all(b.amount == Money(-100) for b in view.balances.values())


def test_execute_uses_default_currency_for_empty_group() -> None:
    use_case = GetGroupBalancesUseCase(
        ledger_repository=_repository(_roster(), []),
        logger=MagicMock(),
        default_currency="GBP",
    )

    view = use_case.execute("empty")

    assert view.currency_code == "GBP"
    assert all(b.is_settled for b in view.balances.values())


def test_execute_propagates_roster_errors() -> None:
    expenses = [
        ExpenseRecord(
            expense_id="stray",
            total=Money(100),
            payer_id="z",
            policy=EqualSplit(),
            participant_ids=("a",),
        ),
    ]
    use_case = GetGroupBalancesUseCase(
        ledger_repository=_repository(_roster(), expenses),
        logger=MagicMock(),
    )

    with pytest.raises(ParticipantNotInRoster):
        use_case.execute("g")


def test_execute_rejects_mixed_currencies() -> None:
    expenses = [
        ExpenseRecord("e1", Money(100), "a", EqualSplit(), ("a",), "EUR"),
        ExpenseRecord("e2", Money(100), "a", EqualSplit(), ("a",), "USD"),
    ]
    use_case = GetGroupBalancesUseCase(
        ledger_repository=_repository(_roster(), expenses),
        logger=MagicMock(),
    )

    with pytest.raises(MixedCurrencies):
        use_case.execute("g")
