"""In-Memory Collaborators: process-local CardDirectory and TransactionLog.

Invariants:
    - withdraw() checks and debits under one lock; balance never drops below zero
    - add_money() is unconditional and serialized with withdraw() on the same lock
    - TransactionLog is append-only; records() returns an immutable snapshot
    - Lookups are by card number; duplicate numbers are rejected at construction

Design Decisions:
    - One lock per directory, not per card: transfers touch at most two cards and
      the directory is meant for single-process use (tests, embedding, demos)
"""

import threading
from typing import Iterable

from card_transfer.core.domain_types import Card, TransactionRecord


class InMemoryCardDirectory:
    """CardDirectory over a dict of Card dataclasses."""

    def __init__(
        self,
        cards: Iterable[Card] = (),
        issuer_prefix: str = "",
    ):
        self.issuer_prefix = issuer_prefix
        self._cards: dict[str, Card] = {}
        self._lock = threading.Lock()
        for card in cards:
            if card.number in self._cards:
                raise ValueError(f"Duplicate card number: {card.number}")
            self._cards[card.number] = card

    def __len__(self) -> int:
        return len(self._cards)

    def find_card(self, number: str) -> Card | None:
        return self._cards.get(number)

    def withdraw(self, card: Card, amount: int) -> bool:
        with self._lock:
            if card.balance < amount:
                return False
            card.balance -= amount
            return True

    def add_money(self, card: Card, amount: int) -> None:
        with self._lock:
            card.balance += amount


class InMemoryTransactionLog:
    """Append-only TransactionLog kept in a list."""

    def __init__(self):
        self._records: list[TransactionRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def add(self, source: str, destination: str, amount: int, total: int) -> None:
        record = TransactionRecord(
            source=source, destination=destination, amount=amount, total=total,
        )
        with self._lock:
            self._records.append(record)

    def records(self) -> tuple[TransactionRecord, ...]:
        with self._lock:
            return tuple(self._records)
