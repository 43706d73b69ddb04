# app/routers/products.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.database import get_db
from app.models.products import Product
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

router = APIRouter(
    prefix="/product",
    tags=["Products"],
)

logger = logging.getLogger("app")


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
):
    product = Product(**product_data.model_dump())

    try:
        db.add(product)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create product")
        raise StorageError.wrap("Failed to create product", exc) from exc

    return product


@router.get("", response_model=list[ProductResponse])
def list_products(
    db: Session = Depends(get_db),
):
    try:
        return db.query(Product).order_by(Product.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch products")
        raise StorageError.wrap("Failed to fetch products", exc) from exc


@router.put("", response_model=ProductResponse | None)
def update_product(
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
):
    # Stock is not editable here: it moves through sales and restocks only
    try:
        product = db.get(Product, product_data.id, with_for_update=True)

        if product is None:
            logger.info(f"Product {product_data.id} not found, nothing updated")
            return None

        for field, value in product_data.changes().items():
            setattr(product, field, value)

        db.commit()
        db.refresh(product)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update product")
        raise StorageError.wrap("Failed to update product", exc) from exc

    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    # Restock history cascades in the database; sale items block the delete
    try:
        db.query(Product).filter(Product.id == product_id).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete product")
        raise StorageError.wrap("Failed to delete product", exc) from exc

    return None
