"""Card Schemas: public card representation.

Invariants:
    - Card numbers are masked in every response (last four digits only)
"""

from pydantic import BaseModel, ConfigDict, field_serializer

from card_transfer.core.domain_types import mask_card_number


class CardResponse(BaseModel):
    """Card as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    issuer: str
    balance: int
    currency: str
    number: str
    icon: str | None = None

    @field_serializer("number")
    def mask_number(self, number: str) -> str:
        return mask_card_number(number)
