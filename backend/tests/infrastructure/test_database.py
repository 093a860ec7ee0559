"""Database Session Manager: tests for rollback and error mapping.

Tests cover:
    - SQLAlchemy errors inside a session surface as DatabaseError with the operation
    - a failed session leaves nothing committed
    - non-database exceptions propagate unchanged
    - health check and the uninitialized get_db dependency
"""

import pytest
from sqlalchemy import func, select, text

from card_transfer.core.errors import DatabaseError
from card_transfer.db.base import Base
from card_transfer.infrastructure import database
from card_transfer.infrastructure.database import DatabaseSessionManager, get_db
from card_transfer.models.card import Card
import card_transfer.models  # noqa: F401


@pytest.fixture
async def manager(tmp_path):
    """Session manager over a file-backed SQLite database with the schema created."""
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'cards.db'}")
    async with mgr.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield mgr
    await mgr.dispose()


def _card(number: str, balance: int = 100_00) -> Card:
    return Card(issuer="Visa", balance=balance, currency="RUB", number=number)


async def test_missing_table_maps_to_operational_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))

    assert exc_info.value.operation == "execute"
    assert exc_info.value.code == "DATABASE_ERROR"
    assert exc_info.value.http_status == 503


async def test_integrity_violation_rolls_back(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(_card("5106210000000001"))
            db.add(_card("5106210000000001"))
            await db.commit()

    assert exc_info.value.operation == "commit"
    async with manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(Card))
    assert count == 0


async def test_negative_balance_rejected_by_check_constraint(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(_card("5106210000000001", balance=-1))
            await db.commit()


async def test_non_database_error_propagates_and_discards_changes(manager):
    with pytest.raises(ValueError, match="boom"):
        async with manager.session() as db:
            db.add(_card("5106210000000001"))
            await db.flush()
            raise ValueError("boom")

    async with manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(Card))
    assert count == 0


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        async for _ in get_db():
            pass
