"""Tests for the catalog routes and app-level endpoints."""


def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"status": "ok"}


def test_product_lifecycle(client):
    created = client.post(
        "/products/",
        json={"title": "Road bike", "price": 450, "category": "Sports", "condition": "used"},
    )
    assert created.status_code == 200
    product_id = created.json()["id"]

    fetched = client.get(f"/products/{product_id}").json()
    assert fetched["title"] == "Road bike"
    assert fetched["sold"] is False

    assert client.put(f"/products/{product_id}/sold").status_code == 200

    sold = client.get("/products/", params={"sold": True}).json()
    assert [p["id"] for p in sold] == [product_id]
    assert client.get("/products/", params={"category": "Toys"}).json() == []


def test_missing_product(client):
    assert client.get("/products/nope").status_code == 404
    assert client.put("/products/nope/sold").status_code == 404


def test_invalid_product(client):
    response = client.post("/products/", json={"title": "Free stuff", "price": 0})
    assert response.status_code == 422
