"""Streamlit dashboard entry point."""

import os

import altair as alt
import streamlit as st

from src.application.use_cases.get_group_balances import (
    GetGroupBalancesUseCase,
    GroupBalancesView,
)
from src.application.use_cases.settle_group import (
    SettleGroupUseCase,
    SettlementPlan,
)
from src.domain.errors import LedgerError
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.utils.decimal_utils import (
    cents_to_decimal,
    describe_balance,
    format_cents,
)


def _fetch_group_balances(group_id: str) -> GroupBalancesView:
    """Fetch member balances for a group from the ledger database."""
    settings = build_settings()
    use_case = GetGroupBalancesUseCase(
        ledger_repository=build_ledger_repository(),
        default_currency=settings.default_currency,
    )
    return use_case.execute(group_id)


@st.cache_data(show_spinner=False)
def _load_group_balances(group_id: str) -> GroupBalancesView:
    """Cached wrapper around _fetch_group_balances."""
    return _fetch_group_balances(group_id)


def _fetch_settlement_plan(group_id: str) -> SettlementPlan:
    """Fetch the settlement plan for a group."""
    settings = build_settings()
    use_case = SettleGroupUseCase(
        ledger_repository=build_ledger_repository(),
        exclude_unpaid=settings.exclude_unpaid,
        default_currency=settings.default_currency,
    )
    return use_case.execute(group_id)


@st.cache_data(show_spinner=False)
def _load_settlement_plan(group_id: str) -> SettlementPlan:
    """Cached wrapper around _fetch_settlement_plan."""
    return _fetch_settlement_plan(group_id)


def _balance_rows(view: GroupBalancesView) -> list[dict[str, str]]:
    """Build table rows with paid, share, and net balance per member."""
    names = view.names
    currency = view.currency_code
    return [
        {
            "Member": names.get(item.participant_id, item.participant_id),
            "Paid": format_cents(item.total_paid.cents, currency),
            "Share": format_cents(item.total_share.cents, currency),
            "Balance": describe_balance(item.net_balance.cents, currency),
        }
        for item in view.details
    ]


def _balance_status(cents: int) -> str:
    if cents > 0:
        return "Is owed"
    if cents < 0:
        return "Owes"
    return "Settled"


def _prepare_balance_chart_data(
    view: GroupBalancesView,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the net balance bar chart.

    Args:
        view: Balances of the group.

    Returns:
        list[dict[str, str | float]]: One row per member with a numeric
        amount for the axis and formatted labels for tooltips.
    """
    names = view.names
    data: list[dict[str, str | float]] = []
    for item in view.details:
        cents = item.net_balance.cents
        data.append(
            {
                "member": names.get(item.participant_id, item.participant_id),
                "amount": float(cents_to_decimal(cents)),
                "amount_label": format_cents(cents, view.currency_code),
                "status": _balance_status(cents),
            }
        )
    return data


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that Altair's numpy/pandas dependencies import cleanly.

    Returns:
        tuple[bool, str | None]: Whether charts can render, and an error
        message when they cannot.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "Charts unavailable: numpy import is incomplete."
    if not hasattr(pandas, "Timestamp"):
        return False, "Charts unavailable: pandas import is incomplete."
    return True, None


def _render_balance_chart(view: GroupBalancesView) -> None:
    """Render a horizontal bar chart of net balances."""
    data = _prepare_balance_chart_data(view)
    if not data:
        st.info("No members in this group.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("amount:Q", title=f"Net balance ({view.currency_code})"),
        y=alt.Y("member:N", sort="-x", title=None),
        color=alt.Color(
            "status:N",
            scale=alt.Scale(
                domain=["Is owed", "Owes", "Settled"],
                range=["#2e7d32", "#e76f51", "#6c8ead"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("member:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("status:N"),
        ],
    ).configure_view(
        stroke=None
    )
    st.subheader("Net balances")
    st.altair_chart(chart, width="stretch")


def _render_settlement(
    plan: SettlementPlan,
    names: dict[str, str],
) -> None:
    """Render the transfer list of a settlement plan."""
    st.subheader("Settle up")
    if plan.excluded_expense_ids:
        st.caption(
            f"{len(plan.excluded_expense_ids)} expense(s) without payer "
            "are not part of this plan."
        )
    if plan.is_settled:
        st.success("Everyone is settled up.")
        return
    data = [
        {
            "From": names.get(transfer.from_id, transfer.from_id),
            "To": names.get(transfer.to_id, transfer.to_id),
            "Amount": format_cents(transfer.amount.cents, plan.currency_code),
        }
        for transfer in plan.transfers
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Split Ledger", layout="wide")
    st.title("Split Ledger")

    group_id = st.sidebar.text_input(
        "Group ID",
        value=os.getenv("LEDGER_GROUP_ID", ""),
    ).strip()
    if not group_id:
        st.info("Enter a group ID to see balances.")
        return

    try:
        view = _load_group_balances(group_id)
        plan = _load_settlement_plan(group_id)
    except LedgerError as exc:
        st.error(str(exc))
        return

    st.caption(f"{len(view.participants)} members")
    if not view.unpaid_total.is_zero():
        st.warning(
            "Expenses without payer: "
            f"{format_cents(view.unpaid_total.cents, view.currency_code)}"
        )
    st.dataframe(_balance_rows(view), width="stretch", hide_index=True)
    _render_balance_chart(view)
    _render_settlement(plan, view.names)


if __name__ == "__main__":  # pragma: no cover
    main()
