"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - Money is always an int in minor currency units (cents, kopecks), never float
    - CardNumber is the lookup key of a card; CardId is its storage identity
    - Endpoint classification is encoded as an Enum, never as raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CardId = NewType("CardId", int)
CardNumber = NewType("CardNumber", str)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", int)       # minor currency units, >= 0 on balances


# ─── Enums ───────────────────────────────────────────────────────

class EndpointKind(str, Enum):
    """Classification of one side of a transfer, computed once per endpoint."""
    INNER = "inner"                 # found in the bank's card directory
    OUTER = "outer"                 # unknown, and not numbered like our cards
    INCONSISTENT = "inconsistent"   # unknown, yet carries our issuer prefix


# ─── Records ─────────────────────────────────────────────────────

@dataclass
class Card:
    """A payment card held by the bank. Balance is mutated only by a CardDirectory."""
    id: CardId
    issuer: str
    balance: Money
    currency: str
    number: CardNumber
    icon: str = ""


@dataclass(frozen=True)
class TransactionRecord:
    """Append-only log entry of a completed transfer."""
    source: CardNumber
    destination: CardNumber
    amount: Money
    total: Money


def mask_card_number(number: str) -> str:
    """Hide all but the last four digits (for logs and error messages)."""
    if len(number) <= 4:
        return number
    return "*" * (len(number) - 4) + number[-4:]
