from decimal import Decimal

from pydantic import BaseModel, Field

from app.schemas.common import RequestModel, UpdateModel


class PurchaseCreate(RequestModel):
    description: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., gt=0, lt=10_000_000_000)
    payment_method: str = Field(..., min_length=1)


class PurchaseUpdate(UpdateModel):
    description: str | None = Field(None, min_length=1, max_length=255)
    price: Decimal | None = Field(None, gt=0, lt=10_000_000_000)
    payment_method: str | None = Field(None, min_length=1)


class PurchaseResponse(BaseModel):
    id: int
    description: str | None
    price: float | None
    payment_method: str | None

    class Config:
        from_attributes = True
