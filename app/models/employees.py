# app/models/employees.py

import enum

from sqlalchemy import Column, Date, Enum, Integer, String

from app.database import Base


class EmployeeRole(str, enum.Enum):
    manager = "manager"
    cashier = "cashier"
    stock_keeper = "stock_keeper"
    sales_rep = "sales_rep"


class Employee(Base):
    __tablename__ = "employee"
    __table_args__ = {"schema": "entity"}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    email = Column(String, unique=True, nullable=True)
    phone = Column(String, nullable=True)
    role = Column(
        Enum(EmployeeRole, name="employee_role", inherit_schema=True),
        nullable=True,
    )
    hire_date = Column(Date, nullable=False)
