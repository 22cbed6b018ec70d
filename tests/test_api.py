from __future__ import annotations

import pytest

from app import create_app
from config import TestConfig


@pytest.fixture()
def seeded(client):
    response = client.post("/api/setup")
    assert response.status_code == 200
    return client


def test_root_and_db_check(client) -> None:
    assert client.get("/").get_data(as_text=True) == "Inventory backend is running"

    payload = client.get("/api/db-test").get_json()
    assert payload["status"] == "ok"
    assert payload["database"] == "connected"
    assert payload["time"]


def test_setup_seeds_once(client) -> None:
    first = client.post("/api/setup").get_json()
    second = client.post("/api/setup").get_json()

    assert first["success"] is True and first["seeded"] == 4
    assert second["success"] is True and second["seeded"] == 0
    assert len(client.get("/api/products").get_json()) == 4


def test_product_crud(client) -> None:
    created = client.post("/api/products", json={
        "name": "Logitech Wireless Mouse M185",
        "category": "Accessories",
        "costPrice": 450,
        "sellingPrice": 799,
        "quantity": 0,
    })
    assert created.status_code == 201
    product = created.get_json()
    assert product["quantity"] == 0
    assert product["sellingPrice"] == 799.0

    fetched = client.get(f"/api/products/{product['id']}").get_json()
    assert fetched == product

    updated = client.put(f"/api/products/{product['id']}", json={"quantity": 25})
    assert updated.status_code == 200
    assert updated.get_json()["quantity"] == 25
    assert updated.get_json()["name"] == "Logitech Wireless Mouse M185"

    assert client.delete(f"/api/products/{product['id']}").status_code == 204
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.delete(f"/api/products/{product['id']}").status_code == 404


def test_product_validation_errors(client) -> None:
    response = client.post("/api/products", json={
        "name": "",
        "category": "Furniture",
        "costPrice": -1,
        "sellingPrice": 4499,
    })
    assert response.status_code == 400
    errors = response.get_json()["errors"]
    assert set(errors) == {"name", "cost_price", "quantity"}
    assert client.get("/api/products").get_json() == []


def test_update_missing_product_is_404(client) -> None:
    assert client.put("/api/products/42", json={"quantity": 1}).status_code == 404


def test_create_sale_defaults_price_and_invoice(seeded) -> None:
    phone = next(p for p in seeded.get("/api/products").get_json() if p["name"] == "Samsung Galaxy A55")

    response = seeded.post("/api/sales", json={
        "customer": "Urban Mart",
        "items": [{"productId": phone["id"], "quantity": 2}],
    })

    assert response.status_code == 201
    order = response.get_json()
    assert order["status"] == "Pending"
    assert order["invoice"] == f"#INV-{1000 + order['id']}"
    assert order["amount"] == 2 * 28999.0
    assert order["items"][0]["productName"] == "Samsung Galaxy A55"
    assert seeded.get(f"/api/sales/{order['id']}").get_json() == order


def test_sale_requires_items_and_known_products(seeded) -> None:
    no_items = seeded.post("/api/sales", json={"customer": "Aarav Shah"})
    assert no_items.status_code == 400
    assert "items" in no_items.get_json()["errors"]

    unknown = seeded.post("/api/sales", json={
        "customer": "Aarav Shah",
        "items": [{"productId": 999, "quantity": 1}],
    })
    assert unknown.status_code == 400
    assert unknown.get_json()["errors"]["items"]["0"]["product_id"]

    bad_quantity = seeded.post("/api/sales", json={
        "customer": "Aarav Shah",
        "items": [{"productId": 1, "quantity": 0}],
    })
    assert bad_quantity.status_code == 400
    assert seeded.get("/api/sales").get_json() == []


def test_sold_product_cannot_be_deleted_until_sale_is_removed(seeded) -> None:
    order = seeded.post("/api/sales", json={
        "customer": "Greenfield Stores",
        "status": "Paid",
        "items": [{"productId": 1, "quantity": 1, "unitPrice": 54000}],
    }).get_json()

    assert seeded.delete("/api/products/1").status_code == 409
    assert seeded.delete(f"/api/sales/{order['id']}").status_code == 204
    assert seeded.get(f"/api/sales/{order['id']}").status_code == 404
    assert seeded.delete("/api/products/1").status_code == 204


def test_dashboard_reports_totals(seeded) -> None:
    assert seeded.get("/api/dashboard").get_json() == {
        "totalProducts": 4,
        "lowStockCount": 1,
        "totalRevenue": 0.0,
    }

    seeded.post("/api/sales", json={
        "customer": "Riya Desai",
        "items": [{"productId": 4, "quantity": 1}, {"productId": 3, "quantity": 2, "unitPrice": 4000}],
    })

    assert seeded.get("/api/dashboard").get_json()["totalRevenue"] == 11500.0 + 8000.0


def test_dashboard_without_threshold_is_unavailable() -> None:
    class NoThresholdConfig(TestConfig):
        LOW_STOCK_THRESHOLD = None

    client = create_app(NoThresholdConfig).test_client()

    response = client.get("/api/dashboard")
    assert response.status_code == 503
    assert "LOW_STOCK_THRESHOLD" in response.get_json()["error"]


def test_unknown_route_returns_json_404(client) -> None:
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_update_accepts_snake_case_keys(seeded) -> None:
    response = seeded.put("/api/products/3", json={"selling_price": 999, "cost_price": 1})

    assert response.status_code == 200
    product = response.get_json()
    assert (product["costPrice"], product["sellingPrice"]) == (1.0, 999.0)
    assert product["name"] == "Office Chair (Ergonomic)"
    assert seeded.get("/api/products/3").get_json() == product


def test_update_with_non_object_body_is_rejected(seeded) -> None:
    before = seeded.get("/api/products/1").get_json()

    response = seeded.put("/api/products/1", json=[1, 2])

    assert response.status_code == 400
    assert "body" in response.get_json()["errors"]
    assert seeded.get("/api/products/1").get_json() == before


def test_api_sends_cors_headers(client) -> None:
    response = client.get("/api/products", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
