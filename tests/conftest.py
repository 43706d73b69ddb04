"""
Shared fixtures: an in-memory SQLite database standing in for PostgreSQL,
a StorageGateway over it and a TestClient for the app.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import BLANK_SCHEMA, MetaData, create_engine, event
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.database import SCHEMAS, Base, StorageGateway
from app.main import create_app


@pytest.fixture
def engine():
    base_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(base_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # SQLite has no schemas: collapse entity/product/purchase/sale into main
    yield base_engine.execution_options(
        schema_translate_map={schema: None for schema in SCHEMAS}
    )

    base_engine.dispose()


@pytest.fixture
def gateway(engine):
    import app.models  # noqa: F401

    # The translate map hides schema-qualified foreign keys from the SQLite DDL,
    # so the tables are created from a copy with every schema stripped
    schemaless = MetaData()
    for table in Base.metadata.sorted_tables:
        table.to_metadata(
            schemaless,
            schema=None,
            referred_schema_fn=lambda *args: BLANK_SCHEMA,
        )
    schemaless.create_all(engine)

    return StorageGateway(engine)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(gateway, settings):
    app = create_app(gateway=gateway)
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def api(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_product(api):
    def _make_product(name="Widget", price=5, stock=10, description=None):
        payload = {"name": name, "price": price, "stock": stock}
        if description is not None:
            payload["description"] = description
        response = api.post("/product", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_product


@pytest.fixture
def seller(api):
    """A client and an employee every sale can reference."""
    client = api.post(
        "/client",
        json={"name": "Ana Torres", "email": "ana@retailshop.com"},
    )
    employee = api.post(
        "/employee",
        json={
            "name": "Luis Pardo",
            "email": "luis@retailshop.com",
            "role": "cashier",
            "hire_date": "2024-03-01",
        },
    )
    assert client.status_code == 201, client.text
    assert employee.status_code == 201, employee.text
    return {"client_id": client.json()["id"], "employee_id": employee.json()["id"]}


@pytest.fixture
def sale_payload(seller):
    def _sale_payload(items, status="Pending", total_amount=100):
        return {
            **seller,
            "total_amount": total_amount,
            "status": status,
            "items": items,
        }

    return _sale_payload
