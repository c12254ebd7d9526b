"""SQLAlchemy Core description of the ledger tables read by the engine.

Only the columns needed to rebuild expense records are described. Amounts
are stored as integer cents; percentages as numeric(5, 2).
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

participants = Table(
    "participants",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("display_name", String(120), nullable=False),
    Column("default_currency", String(3), nullable=False, default="USD"),
    Column("deleted_at", DateTime, nullable=True),
)

group_members = Table(
    "group_members",
    metadata,
    Column("group_id", String(36), primary_key=True),
    Column(
        "participant_id",
        String(36),
        ForeignKey("participants.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("joined_at", DateTime, nullable=True),
    Column("deleted_at", DateTime, nullable=True),
)

expenses = Table(
    "expenses",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("group_id", String(36), nullable=True, index=True),
    Column(
        "paid_by_participant_id",
        String(36),
        ForeignKey("participants.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("description", String(200), nullable=False, default=""),
    Column("amount_cents", BigInteger, nullable=False),
    Column("currency", String(3), nullable=False, default="USD"),
    Column("split_type", String(20), nullable=False, default="equal"),
    Column("expense_date", Date, nullable=True),
    Column("notes", Text, nullable=True),
    Column("created_at", DateTime, nullable=True),
    Column("deleted_at", DateTime, nullable=True),
)

expense_splits = Table(
    "expense_splits",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "expense_id",
        String(36),
        ForeignKey("expenses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "participant_id",
        String(36),
        ForeignKey("participants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("share_cents", BigInteger, nullable=False),
    Column("share_percent", Numeric(5, 2), nullable=True),
    Column("created_at", DateTime, nullable=True),
    UniqueConstraint(
        "expense_id",
        "participant_id",
        name="UQ_expense_splits_expense_participant",
    ),
)

SPLIT_TYPES = ("equal", "custom", "percentage")


__all__ = [
    "metadata",
    "participants",
    "group_members",
    "expenses",
    "expense_splits",
    "SPLIT_TYPES",
]
