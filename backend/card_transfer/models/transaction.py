"""Transaction ORM: append-only record of completed transfers.

Invariants:
    - One row per successful transfer, written in the same commit as the balance changes
    - Rows are never updated or deleted by this service
    - source/destination are raw card numbers; either side may be an outer card
      with no row in `cards`, so there are no foreign keys
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from card_transfer.db.base import Base


class Transaction(Base):
    """Transaction entity: {source, destination, amount, total}."""
    __tablename__ = "transactions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    source: Mapped[str] = mapped_column(String(19), nullable=False, index=True)
    destination: Mapped[str] = mapped_column(String(19), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    total: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
