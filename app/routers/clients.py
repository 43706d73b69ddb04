# app/routers/clients.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.database import get_db
from app.models.clients import Client
from app.schemas.client import ClientCreate, ClientResponse, ClientUpdate

router = APIRouter(prefix="/client", tags=["Clients"])

logger = logging.getLogger("app")


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(client_data: ClientCreate, db: Session = Depends(get_db)):
    client = Client(**client_data.model_dump())

    try:
        db.add(client)
        db.commit()
        db.refresh(client)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create client")
        raise StorageError.wrap("Failed to create client", exc) from exc

    return client


@router.get("", response_model=list[ClientResponse])
def list_clients(db: Session = Depends(get_db)):
    try:
        return db.query(Client).order_by(Client.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch clients")
        raise StorageError.wrap("Failed to fetch clients", exc) from exc


@router.put("", response_model=ClientResponse | None)
def update_client(client_data: ClientUpdate, db: Session = Depends(get_db)):
    try:
        client = db.get(Client, client_data.id, with_for_update=True)
        if client is None:
            logger.info(f"Client {client_data.id} not found, nothing updated")
            return None

        for field, value in client_data.changes().items():
            setattr(client, field, value)

        db.commit()
        db.refresh(client)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update client")
        raise StorageError.wrap("Failed to update client", exc) from exc

    return client


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: int, db: Session = Depends(get_db)):
    try:
        db.query(Client).filter(Client.id == client_id).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete client")
        raise StorageError.wrap("Failed to delete client", exc) from exc

    return None
