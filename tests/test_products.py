from datetime import date, timedelta
from decimal import Decimal

import pytest

from inventory_api.services.product_service import product_service
from tests.conftest import API


def test_create_product(auth_client, api_category):
    response = auth_client.post(
        f"{API}/products",
        json={
            "name": "Agua 1L",
            "product_number": "AG-1",
            "category_id": api_category["id"],
            "stock": 20,
            "price": 1.5,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["price"]) == Decimal("1.50")
    assert body["notification_sent"] is False


def test_create_product_with_invalid_category(auth_client):
    response = auth_client.post(
        f"{API}/products",
        json={"name": "X", "product_number": "X-1", "category_id": 999, "price": "1.00"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Categoría inválida"


def test_create_product_with_duplicate_number(auth_client, make_api_product, api_category):
    existing = make_api_product()

    response = auth_client.post(
        f"{API}/products",
        json={
            "name": "Copia",
            "product_number": existing["product_number"],
            "category_id": api_category["id"],
            "price": "1.00",
        },
    )

    assert response.status_code == 400


def test_negative_stock_is_rejected(auth_client, api_category):
    response = auth_client.post(
        f"{API}/products",
        json={"name": "X", "product_number": "X-2", "category_id": api_category["id"], "stock": -1, "price": "1"},
    )

    assert response.status_code == 400


def test_get_missing_product_returns_404(auth_client):
    assert auth_client.get(f"{API}/products/999").status_code == 404


@pytest.mark.parametrize(
    "field, value",
    [
        ("stock", 10**19),
        ("stock", 2**31),
        ("price", "100000000.00"),
        ("price", "123456789012345678.31"),
    ],
)
def test_values_beyond_column_limits_are_rejected(auth_client, api_category, make_api_product, field, value):
    body = {"name": "X", "product_number": "X-3", "category_id": api_category["id"], "price": "1.00"}
    body[field] = value

    assert auth_client.post(f"{API}/products", json=body).status_code == 400

    product = make_api_product()
    response = auth_client.put(f"{API}/products/{product['id']}", json={field: value})
    assert response.status_code == 400


def test_largest_price_and_stock_are_stored_exactly(auth_client, make_api_product):
    product = make_api_product(stock=2**31 - 1, price="99999999.99")

    stored = auth_client.get(f"{API}/products/{product['id']}").json()
    assert stored["stock"] == 2**31 - 1
    assert Decimal(stored["price"]) == Decimal("99999999.99")


def test_malformed_product_id_returns_404(auth_client):
    assert auth_client.get(f"{API}/products/abc").status_code == 404
    assert auth_client.delete(f"{API}/products/abc").status_code == 404
    assert auth_client.put(f"{API}/products/notification/abc").status_code == 404


def test_list_products_newest_first(auth_client, make_api_product):
    first = make_api_product()
    second = make_api_product()

    ids = [p["id"] for p in auth_client.get(f"{API}/products").json()]

    assert ids == [second["id"], first["id"]]


def test_partial_update_keeps_other_fields(auth_client, make_api_product):
    product = make_api_product(stock=7, price="3.00")

    response = auth_client.put(f"{API}/products/{product['id']}", json={"price": "3.75"})

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["price"]) == Decimal("3.75")
    assert body["stock"] == 7
    assert body["name"] == product["name"]


def test_update_product_number_taken_by_another(auth_client, make_api_product):
    first = make_api_product()
    second = make_api_product()

    response = auth_client.put(
        f"{API}/products/{second['id']}", json={"product_number": first["product_number"]}
    )

    assert response.status_code == 400


def test_update_missing_product_returns_404(auth_client):
    assert auth_client.put(f"{API}/products/999", json={"name": "Nada"}).status_code == 404


def test_expiring_products_and_notifications(auth_client, make_api_product):
    soon = make_api_product(expiration_date=str(date.today() + timedelta(days=3)))
    sooner = make_api_product(expiration_date=str(date.today() + timedelta(days=1)))
    make_api_product(expiration_date=str(date.today() + timedelta(days=30)))
    make_api_product(expiration_date=str(date.today() - timedelta(days=1)))
    make_api_product()

    expiring = auth_client.get(f"{API}/products/expiring").json()
    assert [p["id"] for p in expiring] == [sooner["id"], soon["id"]]

    response = auth_client.put(f"{API}/products/notification/{soon['id']}")
    assert response.status_code == 200
    assert response.json()["notification_sent"] is True
    assert [p["id"] for p in auth_client.get(f"{API}/products/expiring").json()] == [sooner["id"]]

    response = auth_client.put(f"{API}/products/reset-notification/{soon['id']}")
    assert response.json()["notification_sent"] is False
    assert len(auth_client.get(f"{API}/products/expiring").json()) == 2


def test_expiring_window_starts_after_today(db_session, make_product):
    today = date(2026, 3, 1)
    dates = {
        "hoy": today,
        "mañana": today + timedelta(days=1),
        "limite": today + timedelta(days=10),
        "fuera": today + timedelta(days=11),
    }
    for label, expires in dates.items():
        make_product(name=label).expiration_date = expires
    db_session.commit()

    expiring = product_service.list_expiring(db_session, today=today)

    assert [p.name for p in expiring] == ["mañana", "limite"]


def test_changing_expiration_date_resets_notification(auth_client, make_api_product):
    product = make_api_product(expiration_date=str(date.today() + timedelta(days=2)))
    auth_client.put(f"{API}/products/notification/{product['id']}")

    response = auth_client.put(
        f"{API}/products/{product['id']}",
        json={"expiration_date": str(date.today() + timedelta(days=5))},
    )

    assert response.json()["notification_sent"] is False


def test_notification_on_missing_product_returns_404(auth_client):
    assert auth_client.put(f"{API}/products/notification/999").status_code == 404


def test_delete_product_keeps_transaction_history(auth_client, make_api_product):
    product = make_api_product(stock=5)
    auth_client.post(f"{API}/transactions/sell", json={"product_id": product["id"], "quantity": 1})

    assert auth_client.delete(f"{API}/products/{product['id']}").status_code == 200
    assert auth_client.get(f"{API}/products/{product['id']}").status_code == 404

    transactions = auth_client.get(f"{API}/transactions").json()
    assert len(transactions) == 1
    assert transactions[0]["product_id"] is None
    assert transactions[0]["product_name"] == product["name"]
