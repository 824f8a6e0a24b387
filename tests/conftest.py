import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["BCRYPT_ROUNDS"] = "4"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import inventory_api.models  # noqa: F401
from inventory_api.core.database import Base, get_db
from inventory_api.main import app
from inventory_api.models import Category, Product, Supplier, User

API = "/api/v1"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    response = client.post(
        f"{API}/auth/register",
        json={
            "name": "Ana Pérez",
            "email": "ana@example.com",
            "password": "secreto123",
            "phone_number": "5551234",
        },
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def auth_client(client, registered_user):
    client.headers.update({"Authorization": f"Bearer {registered_user['access_token']}"})
    return client


@pytest.fixture
def api_category(auth_client):
    response = auth_client.post(f"{API}/categories", json={"name": "Bebidas"})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def api_supplier(auth_client):
    response = auth_client.post(
        f"{API}/suppliers",
        json={"name": "Distribuidora Sur", "email": "ventas@sur.com", "phone_number": "5550000"},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def make_api_product(auth_client, api_category):
    counter = {"n": 0}

    def _make(stock=10, price="5.00", **extra):
        counter["n"] += 1
        body = {
            "name": f"Producto {counter['n']}",
            "product_number": f"P-{counter['n']:04d}",
            "category_id": api_category["id"],
            "stock": stock,
            "price": price,
        }
        body.update(extra)
        response = auth_client.post(f"{API}/products", json=body)
        assert response.status_code == 200, response.text
        return response.json()

    return _make


# Datos directos en la sesión para pruebas de servicios

@pytest.fixture
def user(db_session):
    user = User(name="Operador", email="op@example.com", password_hash="x", phone_number="1")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def category(db_session):
    category = Category(name="General")
    db_session.add(category)
    db_session.commit()
    return category


@pytest.fixture
def supplier(db_session):
    supplier = Supplier(name="Proveedor Uno", email="uno@proveedor.com", phone_number="2")
    db_session.add(supplier)
    db_session.commit()
    return supplier


@pytest.fixture
def make_product(db_session, category):
    counter = {"n": 0}

    def _make(stock=10, price="5.00", name=None):
        counter["n"] += 1
        product = Product(
            name=name or f"Artículo {counter['n']}",
            product_number=f"A-{counter['n']:04d}",
            category_id=category.id,
            stock=stock,
            price=Decimal(price),
        )
        db_session.add(product)
        db_session.commit()
        return product

    return _make
