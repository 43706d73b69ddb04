# models/sales.py

import enum

from sqlalchemy import Column, Enum, Integer, DateTime, ForeignKey, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class SaleStatus(str, enum.Enum):
    pending = "Pending"
    completed = "Completed"
    canceled = "Canceled"


class Sale(Base):
    __tablename__ = "sale"
    __table_args__ = {"schema": "sale"}

    id = Column(Integer, primary_key=True, index=True)

    client_id = Column(Integer, ForeignKey("entity.client.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("entity.employee.id"), nullable=False, index=True)

    total_amount = Column(Numeric(12, 2), nullable=False)

    status = Column(
        Enum(
            SaleStatus,
            name="sale_status",
            inherit_schema=True,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=SaleStatus.pending,
        server_default=SaleStatus.pending.value,
    )

    sale_date = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id",
    )
