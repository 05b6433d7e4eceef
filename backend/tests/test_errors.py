from sqlalchemy.exc import OperationalError

from models.product import Product


def test_fetch_failure_returns_generic_message(client, db_engine):
    Product.__table__.drop(db_engine)
    resp = client.get("/products")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to load data", "kind": "fetch"}


def test_mutation_failure_returns_generic_message(client, db_engine):
    Product.__table__.drop(db_engine)
    resp = client.post("/products", json={"name": "A", "sku": "B", "price": 1, "stock_quantity": 1})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to save changes", "kind": "mutation"}

    failed = client.get("/logs", params={"status": "FAIL"}).json()["items"]
    assert [item["action"] for item in failed] == ["PRODUCT_CREATE"]


def test_dashboard_fetch_failure(client, db_engine):
    Product.__table__.drop(db_engine)
    resp = client.get("/stats/summary")
    assert resp.status_code == 500
    assert resp.json()["kind"] == "fetch"


def broken_write_log(db, **kwargs):
    raise OperationalError("INSERT INTO logs", {}, Exception("logs unavailable"))


def test_audit_failure_after_commit_keeps_success(client, monkeypatch):
    monkeypatch.setattr("utils.errors.write_log", broken_write_log)
    resp = client.post("/products", json={"name": "A", "sku": "B", "price": 1, "stock_quantity": 1})
    assert resp.status_code == 201
    assert resp.json()["sku"] == "B"

    product_id = resp.json()["id"]
    resp = client.put(f"/products/{product_id}", json={"name": "A2", "sku": "B", "price": 2, "stock_quantity": 1})
    assert resp.status_code == 200
    assert client.delete(f"/products/{product_id}").status_code == 200
    assert client.get("/products").json()["total"] == 0


def test_category_audit_failure_after_commit(client, monkeypatch):
    monkeypatch.setattr("utils.errors.write_log", broken_write_log)
    resp = client.post("/categories", json={"name": "Books"})
    assert resp.status_code == 201
    assert client.get("/categories").json()[0]["name"] == "Books"
