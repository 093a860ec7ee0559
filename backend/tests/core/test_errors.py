"""Error Hierarchy: tests for codes, statuses and the REST envelope.

Tests cover:
    - each domain error carries its code, category and HTTP status
    - InsufficientFundsError is recoverable, the others are not
    - to_response() masks card numbers and exposes the would-have-been total
"""

from card_transfer.core.errors import (
    CardNotFoundError,
    CardTransferError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    InsufficientFundsError,
    InvalidAmountError,
    ResourceNotFoundError,
)


def test_invalid_amount_is_validation_400():
    err = InvalidAmountError(-5)
    assert err.code == "INVALID_AMOUNT"
    assert err.category is ErrorCategory.VALIDATION
    assert err.http_status == 400
    assert "-5" in err.message


def test_card_not_found_masks_number_in_message():
    err = CardNotFoundError("5106219999991234")
    assert err.http_status == 404
    assert "5106219999991234" not in err.message
    assert "1234" in err.message


def test_insufficient_funds_is_recoverable_business_rule():
    err = InsufficientFundsError(1010_00)
    assert err.category is ErrorCategory.BUSINESS_RULE
    assert err.http_status == 422
    assert err.recoverable is True
    assert err.total == 1010_00


def test_infrastructure_errors_are_not_recoverable():
    assert DatabaseError("boom", "commit").recoverable is False
    assert ResourceNotFoundError("Card", "1234").recoverable is False


def test_all_errors_share_base_class():
    for err in (
        InvalidAmountError(0),
        CardNotFoundError("1"),
        InsufficientFundsError(1),
        ResourceNotFoundError("Card", "1"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, CardTransferError)


def test_to_response_envelope():
    ctx = ErrorContext(
        source="5106210000000001", destination="4000000000000002",
        amount=1000_00, total=1010_00,
    )
    body = InsufficientFundsError(1010_00, ctx).to_response()["error"]
    assert body["code"] == "INSUFFICIENT_FUNDS"
    assert body["severity"] == "warning"
    assert body["context"] == {
        "source": "************0001",
        "destination": "************0002",
        "amount": 1000_00,
        "total": 1010_00,
    }
    assert "timestamp" in body


def test_to_response_without_context():
    body = InvalidAmountError(0).to_response()["error"]
    assert body["context"]["source"] is None
    assert body["context"]["total"] is None
