# app/models/products.py

from sqlalchemy import Column, Integer, String, Numeric, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Product(Base):
    __tablename__ = "product"
    __table_args__ = {"schema": "product"}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    description = Column(String(255), nullable=True)
    price = Column(Numeric(12, 2), nullable=False)

    # No lower bound: sales may drive stock negative unless configured otherwise
    stock = Column(Integer, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    inventory = relationship(
        "Inventory",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
