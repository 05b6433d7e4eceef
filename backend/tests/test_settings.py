def test_default_settings(client):
    data = client.get("/settings").json()
    assert data["theme"] == "light"
    assert data["currency"] == "SAR"


def test_save_settings(client):
    payload = {"theme": "dark", "company_name": "Acme", "phone": "+966 50 123 4567"}
    resp = client.put("/settings", json=payload)
    assert resp.status_code == 200
    data = client.get("/settings").json()
    assert data["theme"] == "dark"
    assert data["company_name"] == "Acme"


def test_invalid_theme_rejected(client):
    assert client.put("/settings", json={"theme": "neon"}).status_code == 422


def test_toggle_theme(client):
    assert client.post("/settings/theme/toggle").json()["theme"] == "dark"
    assert client.post("/settings/theme/toggle").json()["theme"] == "light"


def test_default_notifications(client):
    data = client.get("/settings").json()
    assert data["low_stock_alerts"] is True
    assert data["new_product_alerts"] is True
    assert data["daily_reports"] is False


def test_save_notifications(client):
    payload = {"theme": "light", "low_stock_alerts": False, "daily_reports": True}
    assert client.put("/settings", json=payload).status_code == 200
    data = client.get("/settings").json()
    assert data["low_stock_alerts"] is False
    assert data["new_product_alerts"] is True
    assert data["daily_reports"] is True

    # Toggling the theme leaves the switches alone
    data = client.post("/settings/theme/toggle").json()
    assert data["theme"] == "dark"
    assert data["daily_reports"] is True
    assert data["low_stock_alerts"] is False
