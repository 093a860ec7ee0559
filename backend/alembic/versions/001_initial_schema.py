"""Initial schema: cards, transactions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cards",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("issuer", sa.String(50), nullable=False),
        sa.Column("balance", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("currency", sa.String(3), nullable=False, server_default="RUB"),
        sa.Column("number", sa.String(19), nullable=False),
        sa.Column("icon", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("balance >= 0", name="ck_cards_balance_non_negative"),
    )
    op.create_index("ix_cards_number", "cards", ["number"], unique=True)

    op.create_table(
        "transactions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("source", sa.String(19), nullable=False),
        sa.Column("destination", sa.String(19), nullable=False),
        sa.Column("amount", sa.BigInteger, nullable=False),
        sa.Column("total", sa.BigInteger, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_transactions_source", "transactions", ["source"])
    op.create_index("ix_transactions_destination", "transactions", ["destination"])


def downgrade() -> None:
    op.drop_index("ix_transactions_destination", table_name="transactions")
    op.drop_index("ix_transactions_source", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_cards_number", table_name="cards")
    op.drop_table("cards")
