from pydantic import BaseModel, Field
from datetime import datetime

from app.schemas.common import RequestModel


class InventoryCreate(RequestModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=1, description="Units to add to the product's stock")


class InventoryResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    time: datetime | None

    class Config:
        from_attributes = True
