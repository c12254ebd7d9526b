"""SQLAlchemy-backed repository for group rosters and expenses."""

from collections import defaultdict

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    EqualSplit,
    ExactAmountsSplit,
    ExpenseRecord,
    Money,
    Participant,
    PercentageSplit,
    SplitPolicy,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading ledger tables through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_participants(self, group_id: str) -> list[Participant]:
        query = text(
            """
            SELECT p.id AS participant_id, p.display_name AS display_name
            FROM group_members gm
            JOIN participants p ON p.id = gm.participant_id
            WHERE gm.group_id = :group_id
              AND gm.deleted_at IS NULL
              AND p.deleted_at IS NULL
            ORDER BY gm.joined_at, p.id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"group_id": group_id}).all()
        return [
            Participant(
                participant_id=str(row.participant_id),
                display_name=row.display_name,
            )
            for row in rows
        ]

    def fetch_expenses(self, group_id: str) -> list[ExpenseRecord]:
        params = {"group_id": group_id}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            expense_rows = conn.execute(
                self._build_expenses_query(),
                params,
            ).all()
            split_rows = conn.execute(
                self._build_splits_query(),
                params,
            ).all()
        roster: tuple[str, ...] | None = None

        splits_by_expense = defaultdict(list)
        for row in split_rows:
            splits_by_expense[str(row.expense_id)].append(row)

        records: list[ExpenseRecord] = []
        for row in expense_rows:
            expense_id = str(row.expense_id)
            splits = splits_by_expense.get(expense_id, [])
            if splits:
                participant_ids = tuple(
                    str(split.participant_id) for split in splits
                )
            else:
                if roster is None:
                    roster = tuple(
                        participant.participant_id
                        for participant in self.fetch_participants(group_id)
                    )
                participant_ids = roster
            records.append(
                ExpenseRecord(
                    expense_id=expense_id,
                    total=Money(int(row.amount_cents)),
                    payer_id=(
                        str(row.payer_id) if row.payer_id is not None else None
                    ),
                    policy=self._build_policy(row.split_type, splits),
                    participant_ids=participant_ids,
                    currency_code=self._currency_code(row.currency),
                    description=row.description or "",
                )
            )
        return records

    @staticmethod
    def _currency_code(value: str | None) -> str:
        return (value or DEFAULT_CURRENCY).upper()

    @staticmethod
    def _build_policy(split_type: str | None, splits) -> SplitPolicy:
        """Translate a stored split type and split rows into a policy.

        Args:
            split_type: Stored split type (equal, custom, or percentage).
            splits: Split rows of the expense, in stored order.

        Returns:
            SplitPolicy: Policy understood by the split calculator.

        Raises:
            RuntimeError: If the split type is unknown.
        """
        kind = (split_type or "equal").strip().lower()
        if kind == "equal":
            return EqualSplit()
        if kind == "custom":
            return ExactAmountsSplit(
                amounts={
                    str(split.participant_id): Money(int(split.share_cents))
                    for split in splits
                }
            )
        if kind == "percentage":
            return PercentageSplit(
                percentages={
                    str(split.participant_id): coerce_decimal(
                        split.share_percent
                    )
                    for split in splits
                }
            )
        raise RuntimeError(f"Unknown split type: {split_type}")

    @staticmethod
    def _build_expenses_query():
        return text(
            """
            SELECT e.id AS expense_id,
                   e.paid_by_participant_id AS payer_id,
                   e.description AS description,
                   e.amount_cents AS amount_cents,
                   e.currency AS currency,
                   e.split_type AS split_type
            FROM expenses e
            WHERE e.group_id = :group_id
              AND e.deleted_at IS NULL
            ORDER BY e.expense_date, e.created_at, e.id
            """
        )

    @staticmethod
    def _build_splits_query():
        return text(
            """
            SELECT s.expense_id AS expense_id,
                   s.participant_id AS participant_id,
                   s.share_cents AS share_cents,
                   s.share_percent AS share_percent
            FROM expense_splits s
            JOIN expenses e ON e.id = s.expense_id
            WHERE e.group_id = :group_id
              AND e.deleted_at IS NULL
            ORDER BY s.expense_id, s.created_at, s.participant_id
            """
        )


__all__ = ["SqlAlchemyLedgerRepository"]
