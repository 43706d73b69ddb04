# models/sale_items.py

from sqlalchemy import Column, Integer, ForeignKey, Numeric
from sqlalchemy.orm import relationship

from app.database import Base


class SaleItem(Base):
    __tablename__ = "sale_item"
    __table_args__ = {"schema": "sale"}

    id = Column(Integer, primary_key=True, index=True)

    sale_id = Column(Integer, ForeignKey("sale.sale.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.product.id"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)

    sale = relationship("Sale", back_populates="items")
    product = relationship("Product")
