"""Boundary Protocols: contracts between the transfer evaluator and its collaborators.

Invariants:
    - Core NEVER imports from the shell; dependency arrows point inward only
    - Card balances are owned by the CardDirectory; the evaluator only holds handles
    - withdraw() is atomic with respect to its own balance check
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the evaluator has no suspension points; async shells
      preload what the evaluator needs and flush afterwards
"""

from typing import Protocol


class CardLike(Protocol):
    """Structural contract for card handles returned by a CardDirectory.

    Satisfied by both the core Card dataclass and the Card ORM model.
    """
    number: str
    balance: int


class CardDirectory(Protocol):
    """Contract for card lookup and balance mutation: implemented by the shell."""
    issuer_prefix: str

    def find_card(self, number: str) -> CardLike | None: ...

    def withdraw(self, card: CardLike, amount: int) -> bool:
        """Debit amount iff balance >= amount. Leaves balance unchanged on failure."""
        ...

    def add_money(self, card: CardLike, amount: int) -> None: ...


class TransactionLog(Protocol):
    """Contract for the append-only transfer log: implemented by the shell."""
    def add(self, source: str, destination: str, amount: int, total: int) -> None: ...
