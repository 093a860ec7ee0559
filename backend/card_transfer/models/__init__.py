"""ORM Models: SQLAlchemy declarative models for cards and transactions.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from card_transfer.models.card import Card  # noqa: F401
from card_transfer.models.transaction import Transaction  # noqa: F401
