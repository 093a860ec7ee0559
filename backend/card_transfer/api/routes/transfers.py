"""Transfer Routes: execute and quote card-to-card transfers.

Invariants:
    - Request bodies validated by Pydantic (TransferCreate) before reaching handlers
    - Domain rejections are raised as CardTransferError; the global handler renders
      them with the would-have-been total in error.context.total
    - Quotes never mutate balances or append transactions
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from card_transfer.config import Settings, get_settings
from card_transfer.core.evaluate_transfer import TransferOutcome
from card_transfer.infrastructure.database import get_db
from card_transfer.schemas.transfer import TransferCreate, TransferResponse
from card_transfer.services.transfer_service import execute_transfer, quote_transfer

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/transfers", tags=["transfers"])


def _to_response(body: TransferCreate, outcome: TransferOutcome) -> TransferResponse:
    if outcome.error is not None:
        raise outcome.error
    return TransferResponse(
        source=body.source,
        destination=body.destination,
        amount=body.amount,
        commission=outcome.total - body.amount,
        total=outcome.total,
        source_kind=outcome.source_kind,
        destination_kind=outcome.destination_kind,
    )


@router.post(
    "", response_model=TransferResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_transfer(
    body: TransferCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Move money between two cards, charging the applicable commission."""
    outcome = await execute_transfer(
        db, body.source, body.destination, body.amount, settings,
    )
    return _to_response(body, outcome)


@router.post("/quote", response_model=TransferResponse)
async def quote(
    body: TransferCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Price a transfer without executing it."""
    outcome = await quote_transfer(
        db, body.source, body.destination, body.amount, settings,
    )
    return _to_response(body, outcome)
