# schemas/sale.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List
from decimal import Decimal

from app.models.sales import SaleStatus
from app.schemas.common import RequestModel
from app.schemas.product import ProductResponse


class SaleItemCreate(RequestModel):
    product_id: int = Field(..., gt=0)
    price: Decimal = Field(..., gt=0, lt=10_000_000_000)
    quantity: int = Field(..., gt=0)


class SaleCreate(RequestModel):
    client_id: int = Field(..., gt=0)
    employee_id: int = Field(..., gt=0)
    total_amount: Decimal = Field(..., gt=0, lt=10_000_000_000)
    status: SaleStatus
    items: List[SaleItemCreate] = Field(..., min_length=1)


class SaleUpdate(RequestModel):
    id: int
    status: SaleStatus


class SaleItemResponse(BaseModel):
    id: int
    sale_id: int
    product_id: int
    quantity: int
    price: float
    product: ProductResponse

    class Config:
        from_attributes = True


class SaleResponse(BaseModel):
    id: int
    client_id: int
    employee_id: int
    total_amount: float
    status: SaleStatus
    sale_date: datetime | None

    class Config:
        from_attributes = True


class SaleDetailResponse(SaleResponse):
    items: List[SaleItemResponse]


class MissingSaleResponse(BaseModel):
    """Body returned for an unknown sale id: no header, no items."""

    items: List[SaleItemResponse] = []
