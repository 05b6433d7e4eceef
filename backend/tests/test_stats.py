def test_summary_empty(client):
    resp = client.get("/stats/summary")
    assert resp.status_code == 200
    data = resp.json()
    assert data["stats"] == {
        "total_products": 0,
        "total_categories": 0,
        "low_stock_products": 0,
        "total_value": 0,
        "average_price": 0,
    }
    assert data["recent_products"] == []


def test_summary_aggregates(client, create_category, create_product):
    create_category()
    create_product(price=10, stock_quantity=5, min_stock_level=2)
    create_product(price=20, stock_quantity=0, min_stock_level=1, sku="SKU-2")

    stats = client.get("/stats/summary").json()["stats"]
    assert stats["total_products"] == 2
    assert stats["total_categories"] == 1
    assert stats["low_stock_products"] == 1
    assert stats["total_value"] == 50
    assert stats["average_price"] == 15


def test_summary_recent_products(client, create_product):
    for n in range(7):
        create_product(name=f"P{n}", sku=f"SKU-{n}", stock_quantity=0 if n == 6 else 50)

    recent = client.get("/stats/summary").json()["recent_products"]
    assert [p["name"] for p in recent] == ["P6", "P5", "P4", "P3", "P2"]
    assert recent[0]["stock_status"] == "out_of_stock"
    assert recent[1]["stock_status"] == "in_stock"


def test_summary_lists_quick_actions(client):
    actions = client.get("/stats/summary").json()["quick_actions"]
    assert {"action": "add-product", "command": {"page": "products", "intent": "add"}} in actions


def test_quick_action_commands(client):
    assert client.get("/stats/quick-actions/add-product").json() == {"page": "products", "intent": "add"}
    assert client.get("/stats/quick-actions/view-all").json() == {"page": "products", "intent": "view"}
    assert client.get("/stats/quick-actions/reports").json() == {"page": "reports", "intent": None}
    assert client.get("/stats/quick-actions/launch").status_code == 404
