from tests.conftest import API


def test_update_profile(auth_client):
    response = auth_client.put(f"{API}/users/profile", json={"name": "Ana María", "phone_number": "5550001"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ana María"
    assert body["phone_number"] == "5550001"
    assert body["email"] == "ana@example.com"


def test_update_profile_email_in_use(auth_client):
    auth_client.post(
        f"{API}/auth/register",
        json={"name": "Luis", "email": "luis@example.com", "password": "secreto123", "phone_number": "1"},
    )

    response = auth_client.put(f"{API}/users/profile", json={"email": "luis@example.com"})

    assert response.status_code == 400


def test_change_password(auth_client):
    response = auth_client.put(
        f"{API}/users/password",
        json={"current_password": "secreto123", "new_password": "nuevaClave1"},
    )
    assert response.status_code == 200

    old = auth_client.post(f"{API}/auth/login", json={"email": "ana@example.com", "password": "secreto123"})
    new = auth_client.post(f"{API}/auth/login", json={"email": "ana@example.com", "password": "nuevaClave1"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_change_password_with_wrong_current(auth_client):
    response = auth_client.put(
        f"{API}/users/password",
        json={"current_password": "otra-cosa", "new_password": "nuevaClave1"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "La contraseña actual es incorrecta"
