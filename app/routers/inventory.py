# app/routers/inventory.py

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.database import StorageGateway, get_db, get_gateway
from app.models.inventory import Inventory
from app.models.products import Product
from app.schemas.inventory import (
    InventoryCreate,
    InventoryResponse,
)

router = APIRouter(
    prefix="/product/inventory",
    tags=["Inventory"],
)

logger = logging.getLogger("app")


@router.post("", response_model=InventoryResponse, status_code=status.HTTP_200_OK)
def add_inventory(
    inventory_data: InventoryCreate,
    gateway: StorageGateway = Depends(get_gateway),
):
    """Record a restock and add its quantity to the product's stock."""
    try:
        with gateway.transaction() as db:
            product = db.get(Product, inventory_data.product_id, with_for_update=True)

            if product is None:
                raise StorageError(
                    "Failed to update inventory",
                    error=f"Product {inventory_data.product_id} does not exist",
                )

            inventory = Inventory(
                product_id=product.id,
                quantity=inventory_data.quantity,
            )
            db.add(inventory)

            product.stock = (product.stock or 0) + inventory_data.quantity

            db.flush()
            db.refresh(inventory)
            result = InventoryResponse.model_validate(inventory)
    except SQLAlchemyError as exc:
        logger.exception("Failed to update inventory")
        raise StorageError.wrap("Failed to update inventory", exc) from exc

    logger.info(
        f"Product {inventory_data.product_id} restocked "
        f"+{inventory_data.quantity}"
    )

    return result


@router.get("", response_model=list[InventoryResponse])
def list_inventory(
    product_id: int | None = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    query = db.query(Inventory)

    if product_id is not None:
        query = query.filter(Inventory.product_id == product_id)

    try:
        return query.order_by(Inventory.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch inventory")
        raise StorageError.wrap("Failed to fetch inventory", exc) from exc
