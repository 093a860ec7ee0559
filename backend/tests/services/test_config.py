"""Settings: tests for environment-driven configuration.

Tests cover:
    - postgresql:// URLs converted for asyncpg
    - commission settings default to 0.5%/10.00, free, 1.5%/30.00
    - negative commission settings rejected
"""

import pytest
from pydantic import ValidationError

from card_transfer.config import Settings


def test_postgres_url_converted_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_left_alone():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_commission_defaults(monkeypatch):
    for name in (
        "FROM_INNER_PERMILLE", "FROM_INNER_MINIMUM", "TO_INNER_PERMILLE",
        "TO_INNER_MINIMUM", "OUTER_PERMILLE", "OUTER_MINIMUM",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert (settings.from_inner_permille, settings.from_inner_minimum) == (5, 10_00)
    assert (settings.to_inner_permille, settings.to_inner_minimum) == (0, 0)
    assert (settings.outer_permille, settings.outer_minimum) == (15, 30_00)
    assert settings.strict_ownership is True


def test_strict_ownership_from_env(monkeypatch):
    monkeypatch.setenv("STRICT_OWNERSHIP", "false")
    assert Settings(_env_file=None).strict_ownership is False


def test_negative_commission_rejected():
    with pytest.raises(ValidationError):
        Settings(outer_minimum=-1)
