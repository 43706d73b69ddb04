# app/models/purchases.py

from sqlalchemy import Column, Integer, String, Numeric

from app.database import Base


class Purchase(Base):
    __tablename__ = "purchase"
    __table_args__ = {"schema": "purchase"}

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=True)
    price = Column(Numeric(12, 2), nullable=True)
    payment_method = Column(String, nullable=True)
