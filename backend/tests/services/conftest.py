"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_settings dependencies overridden for route tests
    - Two inner cards seeded with 1000.00 each; outer numbers never seeded

Design Decisions:
    - SQLite in-memory: fast, no external dependency; FOR UPDATE is a no-op there
    - Balances read back through fresh sessions so the request's commit is what we see
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from card_transfer.config import Settings, get_settings
from card_transfer.db.base import Base
from card_transfer.infrastructure.database import get_db
from card_transfer.main import app
from card_transfer.models.card import Card as CardModel
from card_transfer.models.transaction import Transaction as TransactionModel
import card_transfer.models  # noqa: F401

CARD_A = "5106210000000001"
CARD_B = "5106210000000002"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        issuer_prefix="510621",
        strict_ownership=True,
        from_inner_permille=5, from_inner_minimum=10_00,
        to_inner_permille=0, to_inner_minimum=0,
        outer_permille=15, outer_minimum=30_00,
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory, test_settings):
    """FastAPI test client with DB and settings dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_cards(test_session_factory):
    """Insert two inner cards with 1000.00 each."""
    async with test_session_factory() as db:
        cards = [
            CardModel(issuer="Visa", balance=1000_00, currency="RUB", number=CARD_A),
            CardModel(issuer="MasterCard", balance=1000_00, currency="RUB", number=CARD_B),
        ]
        db.add_all(cards)
        await db.commit()
    return cards


@pytest.fixture
def read_balance(test_session_factory):
    """Return an async callable that reads a card balance in a fresh session."""
    async def _read(number: str) -> int:
        async with test_session_factory() as db:
            result = await db.execute(
                select(CardModel.balance).where(CardModel.number == number),
            )
            return result.scalar_one()
    return _read


@pytest.fixture
def read_transactions(test_session_factory):
    """Return an async callable listing logged transactions in a fresh session."""
    async def _read() -> list[TransactionModel]:
        async with test_session_factory() as db:
            result = await db.execute(select(TransactionModel))
            return list(result.scalars().all())
    return _read
