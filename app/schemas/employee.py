from datetime import date

from pydantic import BaseModel, EmailStr, Field

from app.models.employees import EmployeeRole
from app.schemas.common import RequestModel, UpdateModel


class EmployeeCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    phone: str | None = None
    role: EmployeeRole
    hire_date: date


class EmployeeUpdate(UpdateModel):
    name: str | None = Field(None, min_length=1, max_length=150)
    email: EmailStr | None = None
    phone: str | None = None
    role: EmployeeRole | None = None
    hire_date: date | None = None


class EmployeeResponse(BaseModel):
    id: int
    name: str
    email: str | None
    phone: str | None
    role: EmployeeRole | None
    hire_date: date

    class Config:
        from_attributes = True
