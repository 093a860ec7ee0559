"""Transfer Service: tests for the async shell without HTTP.

Tests cover:
    - build_commission_policy maps settings onto the three legs
    - execute_transfer commits on success and returns the outcome
    - execute_transfer rejects non-positive amounts before touching the DB
    - quote_transfer leaves balances untouched
"""

from card_transfer.core.errors import InsufficientFundsError, InvalidAmountError
from card_transfer.services.transfer_service import (
    build_commission_policy,
    execute_transfer,
    quote_transfer,
)

CARD_A = "5106210000000001"
CARD_B = "5106210000000002"


def test_build_commission_policy_from_settings(test_settings):
    policy = build_commission_policy(test_settings)
    assert policy.from_inner(500_00) == 10_00
    assert policy.from_inner(1_000_000_00) == 5_000_00
    assert policy.to_inner(500_00) == 0
    assert policy.from_outer_to_outer(1000_00) == 30_00


async def test_execute_transfer_commits(test_db, seed_cards, test_settings, read_balance):
    outcome = await execute_transfer(test_db, CARD_A, CARD_B, 500_00, test_settings)

    assert outcome.ok
    assert outcome.total == 510_00
    assert await read_balance(CARD_A) == 490_00
    assert await read_balance(CARD_B) == 1500_00


async def test_execute_transfer_rejection_rolls_back(
    test_db, seed_cards, test_settings, read_balance, read_transactions,
):
    outcome = await execute_transfer(test_db, CARD_A, CARD_B, 1000_00, test_settings)

    assert isinstance(outcome.error, InsufficientFundsError)
    assert outcome.total == 1010_00
    assert await read_balance(CARD_A) == 1000_00
    assert await read_transactions() == []


async def test_execute_transfer_invalid_amount_skips_db(test_settings):
    class _NoDb:
        def __getattr__(self, name):
            raise AssertionError(f"database touched: {name}")

    outcome = await execute_transfer(_NoDb(), CARD_A, CARD_B, -1, test_settings)

    assert outcome.total == 0
    assert isinstance(outcome.error, InvalidAmountError)


async def test_quote_transfer_leaves_balances(test_db, seed_cards, test_settings, read_balance):
    outcome = await quote_transfer(test_db, CARD_A, CARD_B, 500_00, test_settings)

    assert outcome.total == 510_00
    assert await read_balance(CARD_A) == 1000_00
