"""Transaction Routes: read-only view of the transfer log.

Invariants:
    - Newest first
    - Optional card filter matches either side of the transfer
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from card_transfer.infrastructure.database import get_db
from card_transfer.models.transaction import Transaction as TransactionModel
from card_transfer.schemas.transaction import TransactionResponse
from card_transfer.schemas.transfer import normalize_card_number

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


@router.get("")
async def list_transactions(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    card: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List logged transfers with pagination."""
    query = select(TransactionModel).order_by(
        TransactionModel.created_at.desc(),
    )
    if card:
        number = normalize_card_number(card)
        query = query.where(or_(
            TransactionModel.source == number,
            TransactionModel.destination == number,
        ))
    query = query.limit(limit).offset(offset)

    result = await db.execute(query)
    return {
        "transactions": [
            TransactionResponse.model_validate(t).model_dump(mode="json")
            for t in result.scalars().all()
        ],
        "pagination": {"limit": limit, "offset": offset},
    }
