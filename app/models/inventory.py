# app/models/inventory.py

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Inventory(Base):
    """One restock event: ``quantity`` units added to a product's stock."""

    __tablename__ = "inventory"
    __table_args__ = {"schema": "product"}

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(
        Integer,
        ForeignKey("product.product.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quantity = Column(Integer, nullable=False)
    time = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship("Product", back_populates="inventory")
