import pytest


# ---------------- CLIENTS ----------------

def test_client_crud(api):
    created = api.post(
        "/client",
        json={"name": "Marta Gil", "email": "marta@retailshop.com", "phone": "555-0101"},
    )
    assert created.status_code == 201
    client = created.json()
    assert client["address"] is None
    assert client["created_at"] is not None

    updated = api.put("/client", json={"id": client["id"], "address": "Calle 9"})
    assert updated.status_code == 200
    assert updated.json()["address"] == "Calle 9"
    assert updated.json()["phone"] == "555-0101"
    assert updated.json()["name"] == "Marta Gil"

    assert [c["id"] for c in api.get("/client").json()] == [client["id"]]

    assert api.delete(f"/client/{client['id']}").status_code == 204
    assert api.get("/client").json() == []


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "marta@retailshop.com"},
        {"name": "Marta", "email": "not-an-email"},
        {"name": "Marta"},
        {"name": "", "email": "marta@retailshop.com"},
    ],
)
def test_client_validation(api, payload):
    assert api.post("/client", json=payload).status_code == 400


def test_client_put_requires_id(api):
    assert api.put("/client", json={"name": "Nobody"}).status_code == 400


def test_duplicate_client_email_is_storage_error(api):
    payload = {"name": "Marta", "email": "marta@retailshop.com"}
    api.post("/client", json=payload)

    response = api.post("/client", json=payload)

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to create client"
    assert len(api.get("/client").json()) == 1


def test_client_with_sales_cannot_be_deleted(api, make_product, sale_payload, seller):
    product = make_product()
    api.post("/sale", json=sale_payload([{"product_id": product["id"], "quantity": 1, "price": 5}]))

    response = api.delete(f"/client/{seller['client_id']}")

    assert response.status_code == 500


# ---------------- EMPLOYEES ----------------

def test_employee_crud(api):
    created = api.post(
        "/employee",
        json={
            "name": "Rosa Vera",
            "email": "rosa@retailshop.com",
            "role": "stock_keeper",
            "hire_date": "2023-11-20",
        },
    )
    assert created.status_code == 201
    employee = created.json()
    assert employee["role"] == "stock_keeper"
    assert employee["hire_date"] == "2023-11-20"

    updated = api.put("/employee", json={"id": employee["id"], "role": "manager"})
    assert updated.status_code == 200
    assert updated.json()["role"] == "manager"
    assert updated.json()["hire_date"] == "2023-11-20"

    assert api.delete(f"/employee/{employee['id']}").status_code == 204
    assert api.get("/employee").json() == []


@pytest.mark.parametrize(
    "change",
    [
        {"role": "janitor"},
        {"hire_date": "someday"},
        {"hire_date": None},
        {"email": "rosa"},
    ],
)
def test_employee_validation(api, change):
    payload = {
        "name": "Rosa Vera",
        "email": "rosa@retailshop.com",
        "role": "cashier",
        "hire_date": "2023-11-20",
        **change,
    }

    assert api.post("/employee", json=payload).status_code == 400


def test_update_unknown_employee(api):
    response = api.put("/employee", json={"id": 8, "name": "Nobody"})

    assert response.status_code == 200
    assert response.json() is None
    assert api.get("/employee").json() == []


# ---------------- PURCHASES ----------------

def test_purchase_crud(api):
    created = api.post(
        "/purchase",
        json={"description": "Shelving", "price": 320.5, "payment_method": "card"},
    )
    assert created.status_code == 201
    purchase = created.json()
    assert purchase["price"] == 320.5

    updated = api.put("/purchase", json={"id": purchase["id"], "payment_method": "cash"})
    assert updated.status_code == 200
    assert updated.json() == {**purchase, "payment_method": "cash"}

    assert api.delete(f"/purchase/{purchase['id']}").status_code == 204
    assert api.get("/purchase").json() == []


def test_purchase_validation(api):
    assert api.post("/purchase", json={"description": "Shelving", "price": 10}).status_code == 400
    assert api.post(
        "/purchase",
        json={"description": "Shelving", "price": 0, "payment_method": "card"},
    ).status_code == 400
    assert api.post(
        "/purchase",
        json={"description": "Shelving", "price": 10_000_000_000, "payment_method": "card"},
    ).status_code == 400


def test_delete_with_non_numeric_id(api):
    assert api.delete("/purchase/abc").status_code == 400
