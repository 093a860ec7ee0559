"""Session-Backed Collaborators: CardDirectory and TransactionLog bound to one AsyncSession.

Invariants:
    - Only the cards preloaded by load() are visible; any other number is not found
    - Preloaded rows are locked (SELECT ... FOR UPDATE) until the session commits
      or rolls back, so withdraw() is atomic against concurrent transfers
    - Mutations and appended transactions stay in the session; nothing is
      persisted until the caller commits

Design Decisions:
    - Async load, sync use: the evaluator has no suspension points, so the async
      shell fetches rows first and flushes them with one commit afterwards
    - SQLite ignores FOR UPDATE; its single-writer lock serializes commits instead
"""

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from card_transfer.models.card import Card
from card_transfer.models.transaction import Transaction


class SessionCardDirectory:
    """CardDirectory over Card rows already loaded into an AsyncSession."""

    def __init__(self, cards: Iterable[Card], issuer_prefix: str = ""):
        self.issuer_prefix = issuer_prefix
        self._cards = {card.number: card for card in cards}

    @classmethod
    async def load(
        cls, db: AsyncSession, numbers: Iterable[str], issuer_prefix: str = "",
    ) -> "SessionCardDirectory":
        """Load and lock the cards with the given numbers."""
        result = await db.execute(
            select(Card)
            .where(Card.number.in_(set(numbers)))
            .order_by(Card.id)
            .with_for_update(),
        )
        return cls(result.scalars().all(), issuer_prefix)

    def find_card(self, number: str) -> Card | None:
        return self._cards.get(number)

    def withdraw(self, card: Card, amount: int) -> bool:
        if card.balance < amount:
            return False
        card.balance -= amount
        return True

    def add_money(self, card: Card, amount: int) -> None:
        card.balance += amount


class SessionTransactionLog:
    """TransactionLog that stages Transaction rows on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    def add(self, source: str, destination: str, amount: int, total: int) -> None:
        row = Transaction(
            source=source, destination=destination, amount=amount, total=total,
        )
        self._db.add(row)
