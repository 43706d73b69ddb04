import pytest
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError

from app.models.products import Product
from app.models.sale_items import SaleItem
from app.models.sales import Sale


@pytest.fixture
def fail_on_item():
    """Raise a storage fault while inserting the n-th sale item."""
    listeners = []

    def _fail_on_item(n):
        inserted = {"count": 0}

        def before_insert(mapper, connection, target):
            inserted["count"] += 1
            if inserted["count"] == n:
                raise SQLAlchemyError("simulated storage fault")

        event.listen(SaleItem, "before_insert", before_insert)
        listeners.append(before_insert)
        return inserted

    yield _fail_on_item

    for listener in listeners:
        event.remove(SaleItem, "before_insert", listener)


def snapshot(gateway):
    with gateway.session() as session:
        return {
            "sales": session.query(Sale).count(),
            "items": session.query(SaleItem).count(),
            "stock": {p.id: p.stock for p in session.query(Product).all()},
        }


def test_failure_on_third_of_five_items_rolls_everything_back(
    api, gateway, make_product, sale_payload, fail_on_item
):
    products = [make_product(name=f"P{i}", stock=10) for i in range(5)]
    before = snapshot(gateway)
    inserted = fail_on_item(3)

    response = api.post(
        "/sale",
        json=sale_payload([
            {"product_id": p["id"], "quantity": 1, "price": 3} for p in products
        ]),
    )

    assert inserted["count"] == 3
    assert response.status_code == 500
    assert response.json()["kind"] == "storage"
    assert response.json()["detail"] == "Failed to create sale"
    assert "simulated storage fault" in response.json()["error"]

    assert snapshot(gateway) == before


def test_missing_product_rolls_back_earlier_items(api, gateway, make_product, sale_payload):
    first = make_product(name="First", stock=10)
    second = make_product(name="Second", stock=10)
    before = snapshot(gateway)

    response = api.post(
        "/sale",
        json=sale_payload([
            {"product_id": first["id"], "quantity": 2, "price": 3},
            {"product_id": second["id"], "quantity": 2, "price": 3},
            {"product_id": 9999, "quantity": 2, "price": 3},
        ]),
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Product 9999 does not exist"
    assert snapshot(gateway) == before


def test_unknown_client_rolls_back(api, gateway, make_product, seller):
    product = make_product(stock=10)
    before = snapshot(gateway)

    response = api.post(
        "/sale",
        json={
            "client_id": 777,
            "employee_id": seller["employee_id"],
            "total_amount": 5,
            "status": "Pending",
            "items": [{"product_id": product["id"], "quantity": 1, "price": 5}],
        },
    )

    assert response.status_code == 500
    assert snapshot(gateway) == before


def test_service_recovers_after_failed_sale(api, make_product, sale_payload, fail_on_item):
    product = make_product(stock=10)
    fail_on_item(1)
    payload = sale_payload([{"product_id": product["id"], "quantity": 1, "price": 5}])

    assert api.post("/sale", json=payload).status_code == 500

    # Only the first insert was armed to fail
    response = api.post("/sale", json=payload)

    assert response.status_code == 201
    assert response.json()["items"][0]["product"]["stock"] == 9
