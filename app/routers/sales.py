# =========================================================
# SALES ROUTER
#
# POST   /sale        create a sale, decrement stock (atomic)
# GET    /sale        all sale headers
# GET    /sale/{id}   header + items with current product state
# PUT    /sale        change status only
# DELETE /sale/{id}   remove sale and its items
#
# Unknown ids are answered with empty results, never 404.
# =========================================================

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, get_settings
from app.core.errors import NotFoundError, StorageError
from app.database import StorageGateway, get_gateway
from app.schemas.sale import (
    MissingSaleResponse,
    SaleCreate,
    SaleDetailResponse,
    SaleResponse,
    SaleUpdate,
)
from app.services.sales import SaleService

router = APIRouter(prefix="/sale", tags=["Sales"])

logger = logging.getLogger("app")


def get_sale_service(
    gateway: StorageGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> SaleService:
    return SaleService(gateway, settings)


# =========================================================
# CREATE SALE
# =========================================================
@router.post("", response_model=SaleDetailResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreate,
    service: SaleService = Depends(get_sale_service),
):
    return service.create_sale(sale_data)


# =========================================================
# LIST SALES
# =========================================================
@router.get("", response_model=list[SaleResponse])
def list_sales(service: SaleService = Depends(get_sale_service)):
    try:
        return service.list_sales()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch sales")
        raise StorageError.wrap("Failed to fetch sales", exc) from exc


# =========================================================
# GET SINGLE SALE
# =========================================================
@router.get("/{sale_id}", response_model=SaleDetailResponse | MissingSaleResponse)
def get_sale(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
):
    try:
        return service.get_sale(sale_id)
    except NotFoundError as exc:
        logger.info(exc.message)
        return MissingSaleResponse()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch sale")
        raise StorageError.wrap("Failed to fetch sale", exc) from exc


# =========================================================
# UPDATE STATUS
# =========================================================
@router.put("", response_model=SaleResponse | None)
def update_sale(
    sale_data: SaleUpdate,
    service: SaleService = Depends(get_sale_service),
):
    try:
        return service.update_status(sale_data.id, sale_data.status)
    except NotFoundError as exc:
        logger.info(f"{exc.message}, nothing updated")
        return None
    except SQLAlchemyError as exc:
        logger.exception("Failed to update sale")
        raise StorageError.wrap("Failed to update sale", exc) from exc


# =========================================================
# DELETE SALE
# =========================================================
@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
):
    try:
        service.delete_sale(sale_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete sale")
        raise StorageError.wrap("Failed to delete sale", exc) from exc

    return None
