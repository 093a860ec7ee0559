"""Card Routes: read-only access to the bank's card directory.

Invariants:
    - Cards are never created, updated or deleted through the API
    - Unknown card numbers return 404 via ResourceNotFoundError
    - Numbers are masked in every response
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from card_transfer.core.domain_types import mask_card_number
from card_transfer.core.errors import ResourceNotFoundError
from card_transfer.infrastructure.database import get_db
from card_transfer.models.card import Card as CardModel
from card_transfer.schemas.card import CardResponse
from card_transfer.schemas.transfer import normalize_card_number

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cards", tags=["cards"])


@router.get("")
async def list_cards(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List cards with pagination."""
    result = await db.execute(
        select(CardModel).order_by(CardModel.id).limit(limit).offset(offset),
    )
    cards = result.scalars().all()
    return {
        "cards": [
            CardResponse.model_validate(c).model_dump() for c in cards
        ],
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/{number}", response_model=CardResponse)
async def get_card(number: str, db: AsyncSession = Depends(get_db)):
    """Get one card by number."""
    number = normalize_card_number(number)
    result = await db.execute(
        select(CardModel).where(CardModel.number == number),
    )
    card = result.scalar_one_or_none()
    if not card:
        raise ResourceNotFoundError("Card", mask_card_number(number))
    return CardResponse.model_validate(card)
