# =========================================================
# SALE WORKFLOW
#
# create_sale runs as one unit of work:
# - header insert
# - per item: stock decrement, then item insert
# Any failure rolls the whole sale back.
# =========================================================

import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.config import Settings
from app.core.errors import (
    DuplicateProductError,
    InsufficientStockError,
    NotFoundError,
    StorageError,
)
from app.database import StorageGateway
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.models.sales import Sale
from app.schemas.product import ProductResponse
from app.schemas.sale import (
    SaleCreate,
    SaleDetailResponse,
    SaleItemCreate,
    SaleItemResponse,
    SaleResponse,
)

logger = logging.getLogger("app")


def find_repeated_products(sale_data: SaleCreate) -> list[int]:
    seen = set()
    repeated = []
    for item in sale_data.items:
        if item.product_id in seen and item.product_id not in repeated:
            repeated.append(item.product_id)
        seen.add(item.product_id)
    return repeated


class SaleService:
    def __init__(self, gateway: StorageGateway, settings: Settings):
        self.gateway = gateway
        self.stock_mode = settings.STOCK_DECREMENT_MODE
        self.allow_negative_stock = settings.ALLOW_NEGATIVE_STOCK

    # =========================================================
    # CREATE
    # =========================================================
    def create_sale(self, sale_data: SaleCreate) -> SaleDetailResponse:
        repeated = find_repeated_products(sale_data)
        if repeated:
            logger.warning(f"Sale rejected, repeated products {repeated}")
            raise DuplicateProductError(repeated)

        try:
            with self.gateway.transaction() as db:
                sale = Sale(**sale_data.model_dump(exclude={"items"}))
                db.add(sale)
                db.flush()

                items = [self._add_item(db, sale, item) for item in sale_data.items]

                result = SaleDetailResponse(
                    **SaleResponse.model_validate(sale).model_dump(),
                    items=items,
                )

        except SQLAlchemyError as exc:
            logger.exception("Sale creation rolled back")
            raise StorageError.wrap("Failed to create sale", exc) from exc

        logger.info(f"Sale {result.id} created with {len(result.items)} items")
        return result

    def _add_item(self, db: Session, sale: Sale, item: SaleItemCreate) -> SaleItemResponse:
        if self.stock_mode == "atomic":
            product = self._decrement_atomic(db, item)
        else:
            product = self._decrement_read_modify_write(db, item)

        # Snapshot before later items touch the session
        snapshot = ProductResponse.model_validate(product)

        sale_item = SaleItem(sale_id=sale.id, **item.model_dump())
        db.add(sale_item)
        db.flush()

        return SaleItemResponse(
            id=sale_item.id,
            sale_id=sale_item.sale_id,
            product_id=sale_item.product_id,
            quantity=sale_item.quantity,
            price=sale_item.price,
            product=snapshot,
        )

    def _missing_product(self, product_id: int) -> StorageError:
        return StorageError(
            "Failed to create sale",
            error=f"Product {product_id} does not exist",
        )

    def _decrement_read_modify_write(self, db: Session, item: SaleItemCreate) -> Product:
        # Plain read then write; concurrent sales of one product can lose an update
        product = db.get(Product, item.product_id)
        if product is None:
            raise self._missing_product(item.product_id)

        current = product.stock or 0
        new_stock = current - item.quantity

        if new_stock < 0 and not self.allow_negative_stock:
            raise InsufficientStockError(item.product_id, current, item.quantity)

        product.stock = new_stock
        db.flush()
        return product

    def _decrement_atomic(self, db: Session, item: SaleItemCreate) -> Product:
        current_stock = func.coalesce(Product.stock, 0)

        stmt = (
            update(Product)
            .where(Product.id == item.product_id)
            .values(stock=current_stock - item.quantity)
            .execution_options(synchronize_session=False)
        )
        if not self.allow_negative_stock:
            stmt = stmt.where(current_stock >= item.quantity)

        result = db.execute(stmt)

        product = db.get(Product, item.product_id, populate_existing=True)
        if product is None:
            raise self._missing_product(item.product_id)

        if result.rowcount == 0:
            raise InsufficientStockError(item.product_id, product.stock or 0, item.quantity)

        return product

    # =========================================================
    # READ
    # =========================================================
    def list_sales(self) -> list[SaleResponse]:
        with self.gateway.session() as db:
            sales = db.scalars(select(Sale).order_by(Sale.id)).all()
            return [SaleResponse.model_validate(s) for s in sales]

    def get_sale(self, sale_id: int) -> SaleDetailResponse:
        with self.gateway.session() as db:
            sale = db.get(Sale, sale_id)
            if sale is None:
                raise NotFoundError(f"Sale {sale_id} not found")

            # Items carry the product as it is now, not as it was at sale time
            items = db.scalars(
                select(SaleItem)
                .join(Product, Product.id == SaleItem.product_id)
                .options(joinedload(SaleItem.product))
                .where(SaleItem.sale_id == sale.id)
                .order_by(SaleItem.id)
            ).all()

            return SaleDetailResponse(
                **SaleResponse.model_validate(sale).model_dump(),
                items=[SaleItemResponse.model_validate(i) for i in items],
            )

    # =========================================================
    # UPDATE / DELETE
    # =========================================================
    def update_status(self, sale_id: int, status) -> SaleResponse:
        with self.gateway.transaction() as db:
            sale = db.get(Sale, sale_id, with_for_update=True)
            if sale is None:
                raise NotFoundError(f"Sale {sale_id} not found")

            sale.status = status
            db.flush()
            result = SaleResponse.model_validate(sale)

        logger.info(f"Sale {sale_id} status set to {result.status.value}")
        return result

    def delete_sale(self, sale_id: int) -> None:
        # Items go with the sale; stock is not restored
        with self.gateway.transaction() as db:
            sale = db.get(Sale, sale_id)
            if sale is not None:
                db.delete(sale)
