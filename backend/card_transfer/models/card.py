"""Card ORM: persists cards issued by the operating bank.

Invariants:
    - number is unique and is the lookup key used by transfers
    - balance is in minor currency units and never negative (CHECK constraint)
    - Rows are created outside this service; transfers only change balance
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from card_transfer.db.base import Base


class Card(Base):
    """Card entity: satisfies core CardLike (number, balance)."""
    __tablename__ = "cards"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_cards_balance_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    issuer: Mapped[str] = mapped_column(String(50), nullable=False)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="RUB")
    number: Mapped[str] = mapped_column(
        String(19), nullable=False, unique=True, index=True,
    )
    icon: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
