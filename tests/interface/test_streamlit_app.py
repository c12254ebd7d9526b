"""Tests for the Streamlit app module."""

from types import SimpleNamespace

from src.adapters.interface.streamlit import app
from src.application.use_cases.get_group_balances import GroupBalancesView
from src.application.use_cases.settle_group import SettlementPlan
from src.domain.errors import UnbalancedInput
from src.domain.models import (
    Balance,
    MemberBalanceDetails,
    Money,
    Participant,
    Transfer,
)


def _view(unpaid_cents: int = 0) -> GroupBalancesView:
    details = [
        MemberBalanceDetails("a", Money(9000), Money(3000)),
        MemberBalanceDetails("b", Money(0), Money(3000)),
        MemberBalanceDetails("c", Money(0), Money(3000)),
    ]
    return GroupBalancesView(
        group_id="trip",
        currency_code="EUR",
        participants=[
            Participant("a", "Alice"),
            Participant("b", "Bob"),
            Participant("c", "Carol"),
        ],
        details=details,
        balances={
            item.participant_id: Balance(item.participant_id, item.net_balance)
            for item in details
        },
        unpaid_total=Money(unpaid_cents),
    )


def _plan() -> SettlementPlan:
    return SettlementPlan(
        group_id="trip",
        currency_code="EUR",
        transfers=[
            Transfer("b", "a", Money(3000)),
            Transfer("c", "a", Money(3000)),
        ],
    )


def test_fetch_group_balances_invokes_use_case(monkeypatch):
    """_fetch_group_balances should wire the repository and settings."""
    calls = {}

    class _FakeUseCase:
        def __init__(self, ledger_repository, default_currency):
            calls["repository"] = ledger_repository
            calls["currency"] = default_currency

        def execute(self, group_id):
            calls["group_id"] = group_id
            return "view"

    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: SimpleNamespace(default_currency="EUR", exclude_unpaid=True),
    )
    monkeypatch.setattr(app, "GetGroupBalancesUseCase", _FakeUseCase)

    result = app._fetch_group_balances("trip")

    assert result == "view"
    assert calls == {
        "repository": "repository",
        "currency": "EUR",
        "group_id": "trip",
    }


def test_fetch_settlement_plan_passes_exclude_flag(monkeypatch):
    captured = {}

    class _FakeUseCase:
        def __init__(self, ledger_repository, exclude_unpaid, default_currency):
            captured["exclude_unpaid"] = exclude_unpaid

        def execute(self, group_id):
            return "plan"

    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: SimpleNamespace(default_currency="USD", exclude_unpaid=False),
    )
    monkeypatch.setattr(app, "SettleGroupUseCase", _FakeUseCase)

    assert app._fetch_settlement_plan("trip") == "plan"
    assert captured["exclude_unpaid"] is False


def test_balance_rows_format_cents_for_display():
    rows = app._balance_rows(_view())

    assert rows[0] == {
        "Member": "Alice",
        "Paid": "90.00 EUR",
        "Share": "30.00 EUR",
        "Balance": "Is owed 60.00 EUR",
    }
    assert rows[1]["Balance"] == "Owes 30.00 EUR"


def test_prepare_balance_chart_data_labels_status():
    data = app._prepare_balance_chart_data(_view())

    assert [row["member"] for row in data] == ["Alice", "Bob", "Carol"]
    assert data[0]["amount"] == 60.0
    assert data[0]["status"] == "Is owed"
    assert data[1]["status"] == "Owes"
    assert data[1]["amount_label"] == "-30.00 EUR"


class _FakeSidebar:
    def __init__(self, group_id: str) -> None:
        self._group_id = group_id

    def text_input(self, label, value=""):
        return self._group_id


class _FakeStreamlit:
    def __init__(self, group_id: str = "trip") -> None:
        self.sidebar = _FakeSidebar(group_id)
        self.config_called = False
        self.title_called = False
        self.captions: list[str] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.successes: list[str] = []
        self.subheaders: list[str] = []
        self.dataframes: list[tuple] = []

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_called = True

    def caption(self, text: str):
        self.captions.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def cache_data(self, **_kwargs):
        def decorator(func):
            return func

        return decorator


def test_main_renders_balances_and_plan(monkeypatch):
    """main should render the balances table and the transfer list."""
    fake_st = _FakeStreamlit()
    charts = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_group_balances", lambda group_id: _view())
    monkeypatch.setattr(app, "_load_settlement_plan", lambda group_id: _plan())
    monkeypatch.setattr(app, "_render_balance_chart", charts.append)

    app.main()

    assert fake_st.config_called
    assert fake_st.title_called
    assert fake_st.errors == []
    assert len(charts) == 1
    balances_table, kwargs = fake_st.dataframes[0]
    assert balances_table[0]["Member"] == "Alice"
    assert kwargs["hide_index"] is True
    transfers_table, _ = fake_st.dataframes[1]
    assert transfers_table[0] == {
        "From": "Bob",
        "To": "Alice",
        "Amount": "30.00 EUR",
    }


def test_main_warns_about_unpaid_expenses(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_load_group_balances",
        lambda group_id: _view(unpaid_cents=1250),
    )
    monkeypatch.setattr(app, "_load_settlement_plan", lambda group_id: _plan())
    monkeypatch.setattr(app, "_render_balance_chart", lambda view: None)

    app.main()

    assert fake_st.warnings == ["Expenses without payer: 12.50 EUR"]


def test_main_asks_for_group_id(monkeypatch):
    fake_st = _FakeStreamlit(group_id="  ")
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert fake_st.infos == ["Enter a group ID to see balances."]
    assert fake_st.dataframes == []


def test_main_surfaces_ledger_errors(monkeypatch):
    """Validation failures should be shown instead of a plan."""
    fake_st = _FakeStreamlit()

    def _raise(group_id):
        raise UnbalancedInput(Money(-300))

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_group_balances", _raise)

    app.main()

    assert len(fake_st.errors) == 1
    assert "-300" in fake_st.errors[0]
    assert fake_st.dataframes == []


def test_render_settlement_reports_settled_group(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    plan = SettlementPlan(
        group_id="trip",
        currency_code="EUR",
        transfers=[],
        excluded_expense_ids=("e9",),
    )

    app._render_settlement(plan, {})

    assert fake_st.successes == ["Everyone is settled up."]
    assert "1 expense(s) without payer" in fake_st.captions[0]
