# app/routers/purchases.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.database import get_db
from app.models.purchases import Purchase
from app.schemas.purchase import PurchaseCreate, PurchaseResponse, PurchaseUpdate

router = APIRouter(prefix="/purchase", tags=["Purchases"])

logger = logging.getLogger("app")


@router.post("", response_model=PurchaseResponse, status_code=status.HTTP_201_CREATED)
def create_purchase(purchase_data: PurchaseCreate, db: Session = Depends(get_db)):
    purchase = Purchase(**purchase_data.model_dump())

    try:
        db.add(purchase)
        db.commit()
        db.refresh(purchase)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create purchase")
        raise StorageError.wrap("Failed to create purchase", exc) from exc

    return purchase


@router.get("", response_model=list[PurchaseResponse])
def list_purchases(db: Session = Depends(get_db)):
    try:
        return db.query(Purchase).order_by(Purchase.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch purchases")
        raise StorageError.wrap("Failed to fetch purchases", exc) from exc


@router.put("", response_model=PurchaseResponse | None)
def update_purchase(purchase_data: PurchaseUpdate, db: Session = Depends(get_db)):
    try:
        purchase = db.get(Purchase, purchase_data.id, with_for_update=True)
        if purchase is None:
            logger.info(f"Purchase {purchase_data.id} not found, nothing updated")
            return None

        for field, value in purchase_data.changes().items():
            setattr(purchase, field, value)

        db.commit()
        db.refresh(purchase)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update purchase")
        raise StorageError.wrap("Failed to update purchase", exc) from exc

    return purchase


@router.delete("/{purchase_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_purchase(purchase_id: int, db: Session = Depends(get_db)):
    try:
        db.query(Purchase).filter(Purchase.id == purchase_id).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete purchase")
        raise StorageError.wrap("Failed to delete purchase", exc) from exc

    return None
