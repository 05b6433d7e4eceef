import os

# Keep the app's own engine off the local database file
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from schemas.settings import Preferences
from utils.preferences import PreferencesStore
import models.product  # noqa: F401
import models.category  # noqa: F401
import models.log  # noqa: F401

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def db_engine():
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_engine):
    app.dependency_overrides[get_db] = override_get_db
    app.state.preferences = PreferencesStore(Preferences())
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def create_category(client):
    def _create(**overrides):
        payload = {"name": "Electronics", "description": "Phones and screens"}
        payload.update(overrides)
        resp = client.post("/categories", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create


@pytest.fixture()
def create_product(client):
    def _create(**overrides):
        payload = {
            "name": "Product A",
            "sku": "SKU-0001",
            "price": 10.0,
            "cost_price": 8.0,
            "stock_quantity": 5,
            "min_stock_level": 2,
            "max_stock_level": 100,
        }
        payload.update(overrides)
        resp = client.post("/products", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
