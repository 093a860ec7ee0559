"""Domain Types: verifies rich type definitions, records and masking.

Tests:
    - NewType wrappers exist and are callable
    - EndpointKind has exactly 3 members and serializes to string
    - TransactionRecord is immutable
    - mask_card_number keeps only the last four digits
"""

import dataclasses

import pytest

from card_transfer.core.domain_types import (
    Card, CardId, CardNumber, EndpointKind, Money, TransactionRecord,
    mask_card_number,
)


def test_identity_and_value_types_wrap_primitives():
    assert CardId(1) == 1
    assert CardNumber("5106210000000001") == "5106210000000001"
    assert Money(100_00) == 10000


def test_endpoint_kind_has_three_states():
    assert set(EndpointKind) == {
        EndpointKind.INNER,
        EndpointKind.OUTER,
        EndpointKind.INCONSISTENT,
    }


def test_endpoint_kind_serializes_to_string():
    assert EndpointKind.INNER == "inner"
    assert EndpointKind("outer") is EndpointKind.OUTER


def test_card_balance_is_mutable():
    card = Card(id=CardId(1), issuer="Visa", balance=Money(0), currency="RUB",
                number=CardNumber("0001"))
    card.balance += 5
    assert card.balance == 5
    assert card.icon == ""


def test_transaction_record_is_frozen():
    record = TransactionRecord("0001", "0002", 500_00, 510_00)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.total = 0


def test_mask_card_number_keeps_last_four():
    assert mask_card_number("5106210000001234") == "************1234"


def test_mask_card_number_leaves_short_numbers():
    assert mask_card_number("0001") == "0001"
    assert mask_card_number("") == ""
