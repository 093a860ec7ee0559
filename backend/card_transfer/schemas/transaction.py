"""Transaction Schemas: public view of the transfer log.

Invariants:
    - Card numbers are masked on both sides
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_serializer

from card_transfer.core.domain_types import mask_card_number


class TransactionResponse(BaseModel):
    """Logged transfer as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    source: str
    destination: str
    amount: int
    total: int
    created_at: datetime

    @field_serializer("source", "destination")
    def mask_numbers(self, number: str) -> str:
        return mask_card_number(number)
