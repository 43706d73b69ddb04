from decimal import Decimal
from pydantic import BaseModel, Field
from datetime import datetime

from app.schemas.common import RequestModel, UpdateModel


class ProductCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: str | None = Field(None, max_length=255)

    price: Decimal = Field(
        ...,
        gt=0,
        lt=10_000_000_000,
        description="Unit price, must be positive",
    )

    stock: int = Field(..., ge=0, description="Units in stock")


class ProductUpdate(UpdateModel):
    name: str | None = Field(None, min_length=1, max_length=150)
    description: str | None = Field(None, max_length=255)
    price: Decimal | None = Field(None, gt=0, lt=10_000_000_000)


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str | None
    price: float
    stock: int | None
    created_at: datetime | None

    class Config:
        from_attributes = True
