"""Transfer Schemas: Pydantic models for the transfer and quote endpoints.

Invariants:
    - Card numbers are normalized (spaces and dashes removed) and digits-only, 12-19 chars
    - amount is a strict JSON integer in minor units (booleans, floats and strings
      are validation errors); non-positive values pass through so the
      evaluator reports them as INVALID_AMOUNT
"""

from pydantic import BaseModel, Field, field_validator

from card_transfer.core.domain_types import EndpointKind

CARD_NUMBER_PATTERN = r"^\d{12,19}$"


def normalize_card_number(v: str) -> str:
    return v.replace(" ", "").replace("-", "").strip()


class TransferCreate(BaseModel):
    """Transfer request: source, destination, amount."""
    source: str = Field(pattern=CARD_NUMBER_PATTERN)
    destination: str = Field(pattern=CARD_NUMBER_PATTERN)
    amount: int = Field(strict=True)

    @field_validator("source", "destination", mode="before")
    @classmethod
    def strip_number(cls, v):
        if isinstance(v, str):
            return normalize_card_number(v)
        return v


class TransferResponse(BaseModel):
    """Transfer result: what was moved and what was debited."""
    source: str
    destination: str
    amount: int
    commission: int
    total: int
    source_kind: EndpointKind
    destination_kind: EndpointKind  # lenient mode reports unknown own numbers as outer
