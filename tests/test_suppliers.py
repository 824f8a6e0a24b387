from tests.conftest import API


def test_create_and_get_supplier(auth_client, api_supplier):
    response = auth_client.get(f"{API}/suppliers/{api_supplier['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "ventas@sur.com"
    assert body["address"] is None


def test_duplicate_supplier_email_is_rejected(auth_client, api_supplier):
    response = auth_client.post(
        f"{API}/suppliers",
        json={"name": "Otro", "email": "ventas@sur.com", "phone_number": "1"},
    )

    assert response.status_code == 400


def test_supplier_missing_required_fields(auth_client):
    response = auth_client.post(f"{API}/suppliers", json={"name": "Sin email"})

    assert response.status_code == 400


def test_get_missing_supplier_returns_404(auth_client):
    assert auth_client.get(f"{API}/suppliers/999").status_code == 404


def test_update_supplier(auth_client, api_supplier):
    response = auth_client.put(
        f"{API}/suppliers/{api_supplier['id']}",
        json={"phone_number": "5559999", "address": "Calle 1"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["phone_number"] == "5559999"
    assert body["address"] == "Calle 1"
    assert body["name"] == "Distribuidora Sur"


def test_update_supplier_email_taken_by_another(auth_client, api_supplier):
    other = auth_client.post(
        f"{API}/suppliers",
        json={"name": "Norte", "email": "norte@example.com", "phone_number": "1"},
    ).json()

    response = auth_client.put(f"{API}/suppliers/{other['id']}", json={"email": "ventas@sur.com"})

    assert response.status_code == 400


def test_suppliers_listed_by_name(auth_client, api_supplier):
    auth_client.post(
        f"{API}/suppliers",
        json={"name": "Abastos", "email": "a@example.com", "phone_number": "1"},
    )

    names = [s["name"] for s in auth_client.get(f"{API}/suppliers").json()]

    assert names == ["Abastos", "Distribuidora Sur"]


def test_delete_supplier_with_transactions_is_refused(auth_client, api_supplier, make_api_product):
    product = make_api_product()
    auth_client.post(
        f"{API}/transactions/purchase",
        json={"product_id": product["id"], "supplier_id": api_supplier["id"], "quantity": 1, "price": "1.00"},
    )

    response = auth_client.delete(f"{API}/suppliers/{api_supplier['id']}")

    assert response.status_code == 400
    assert "1 transacción(es)" in response.json()["detail"]
    assert auth_client.get(f"{API}/suppliers/{api_supplier['id']}").status_code == 200


def test_delete_supplier_without_transactions(auth_client, api_supplier):
    assert auth_client.delete(f"{API}/suppliers/{api_supplier['id']}").status_code == 200
    assert auth_client.get(f"{API}/suppliers/{api_supplier['id']}").status_code == 404
