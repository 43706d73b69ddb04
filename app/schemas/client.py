from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import RequestModel, UpdateModel


class ClientCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    phone: str | None = None
    address: str | None = None


class ClientUpdate(UpdateModel):
    name: str | None = Field(None, min_length=1, max_length=150)
    email: EmailStr | None = None
    phone: str | None = None
    address: str | None = None


class ClientResponse(BaseModel):
    id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: datetime | None

    class Config:
        from_attributes = True
