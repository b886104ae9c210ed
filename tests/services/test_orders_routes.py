import pytest
from fastapi.testclient import TestClient


def test_list_orders(client: TestClient):
    response = client.get("/orders")

    assert response.status_code == 200
    body = response.json()
    assert [order["id"] for order in body] == [1, 2, 3]
    assert body[0]["userId"] == "u1"
    assert body[0]["products"] == [{"name": "Pen", "price": 10.0, "count": 2}]


def test_list_orders_empty(client: TestClient):
    for order_id in (1, 2, 3):
        assert client.delete(f"/orders/{order_id}").status_code == 204

    response = client.get("/orders")

    assert response.status_code == 200
    assert response.json() == []


def test_get_order(client: TestClient):
    response = client.get("/orders/2")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 2
    assert body["userId"] == "u1"
    assert body["products"][0]["price"] == 5
    assert body["products"][0]["count"] == 2


@pytest.mark.parametrize("raw_id", ["999", "abc", "-1", "0"])
def test_get_order_not_found(client: TestClient, raw_id: str):
    response = client.get(f"/orders/{raw_id}")

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}


def test_get_order_oversized_id(client: TestClient):
    response = client.get("/orders/" + "9" * 5000)

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}


def test_get_order_parses_leading_digits(client: TestClient):
    # "2abc" is read as 2, the same way parseInt does
    response = client.get("/orders/2abc")

    assert response.status_code == 200
    assert response.json()["id"] == 2


def test_order_total(client: TestClient):
    response = client.get("/orders/1/order-total")

    assert response.status_code == 201
    assert response.json() == {"total": 20}


def test_order_total_empty_order(client: TestClient):
    response = client.get("/orders/3/order-total")

    assert response.status_code == 201
    assert response.json() == {"total": 0}


def test_order_total_not_found(client: TestClient):
    response = client.get("/orders/42/order-total")

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}


def test_create_then_get_order(client: TestClient):
    payload = {"userId": "u1", "products": [{"price": 10, "count": 2}]}

    created = client.post("/orders", json=payload)

    assert created.status_code == 201
    order = created.json()
    assert order["id"] == 4
    assert order["userId"] == "u1"
    assert order["products"] == [{"price": 10.0, "count": 2}]

    fetched = client.get(f"/orders/{order['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == order


def test_create_order_ids_not_reused(client: TestClient):
    payload = {"userId": "u2", "products": []}

    first = client.post("/orders", json=payload).json()
    client.delete(f"/orders/{first['id']}")
    second = client.post("/orders", json=payload).json()

    assert second["id"] == first["id"] + 1


def test_create_order_unknown_user_is_accepted(client: TestClient):
    response = client.post("/orders", json={"userId": "nobody", "products": []})

    assert response.status_code == 201
    assert response.json()["userId"] == "nobody"


@pytest.mark.parametrize(
    "payload",
    [
        {"products": []},
        {"userId": "u1"},
        {"userId": "u1", "products": [{"price": "cheap", "count": 1}]},
        {"userId": "u1", "products": [{"price": 1, "count": 0}]},
        {"userId": "u1", "products": [{"price": 1, "count": 1_000_001}]},
        {"userId": "u1", "products": [{"price": 1e10, "count": 1}]},
        {"userId": "u1", "products": [], "status": "new"},
    ],
)
def test_create_order_invalid_body(client: TestClient, payload: dict):
    response = client.post("/orders", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert body["details"]


@pytest.mark.parametrize(
    ("price", "count"),
    [("NaN", "1"), ("Infinity", "1"), ("-Infinity", "1"), ("1", "1" + "0" * 400)],
)
def test_create_order_rejects_unbounded_numbers(client: TestClient, price: str, count: str):
    raw = f'{{"userId": "u1", "products": [{{"price": {price}, "count": {count}}}]}}'
    response = client.post(
        "/orders", content=raw, headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"

    balance = client.get("/users/u1/balance-by-date/2023-01-01")
    assert balance.status_code == 201


def test_update_order_partial(client: TestClient):
    before = client.get("/orders/1").json()

    response = client.put("/orders/1", json={"userId": "u2"})

    assert response.status_code == 201
    after = client.get("/orders/1").json()
    assert after["userId"] == "u2"
    assert after["products"] == before["products"]
    assert after["createdAt"] == before["createdAt"]
    assert response.json() == after


def test_update_order_products(client: TestClient):
    products = [{"name": "Ink", "price": 1.5, "count": 4}]

    response = client.put("/orders/2", json={"products": products})

    assert response.status_code == 201
    assert response.json()["userId"] == "u1"
    assert response.json()["products"] == products


def test_update_order_not_found(client: TestClient):
    response = client.put("/orders/999", json={"userId": "u2"})

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}


@pytest.mark.parametrize("payload", [{"userId": None}, {"id": 7}])
def test_update_order_invalid_body(client: TestClient, payload: dict):
    response = client.put("/orders/1", json=payload)

    assert response.status_code == 400
    assert client.get("/orders/1").json()["userId"] == "u1"


def test_delete_order(client: TestClient):
    response = client.delete("/orders/1")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/orders/1").status_code == 404


def test_delete_order_not_found(client: TestClient):
    response = client.delete("/orders/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}
