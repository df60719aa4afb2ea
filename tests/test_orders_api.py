import uuid

ORDER = {
    "deliveryMethod": "COURIER",
    "customerEmail": "buyer@example.com",
    "customerPhone": "+48123456789",
    "deliveryAddress": {
        "street": "Main 1",
        "city": "Krakow",
        "postalCode": "30-001",
        "country": "PL",
    },
    "paymentMethod": "CARD",
}


def test_place_and_fetch_order(client):
    created = client.post("/api/orders", json=ORDER)

    assert created.status_code == 201
    body = created.json()
    assert uuid.UUID(body["orderUid"])
    assert body["orderDate"] is not None
    assert body["deliveryAddress"]["postalCode"] == "30-001"
    assert "id" not in body

    fetched = client.get(f"/api/orders/{body['orderUid']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_unknown_order_is_not_found(client):
    response = client.get(f"/api/orders/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.content == b""


def test_order_requires_valid_email_and_address(client):
    response = client.post(
        "/api/orders",
        json={**ORDER, "customerEmail": "nope", "deliveryAddress": {"street": "Main 1"}},
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert "customerEmail" in fields
    assert "deliveryAddress.city" in fields


def test_admin_lists_orders(admin_client):
    assert admin_client.get("/api/orders").status_code == 204

    admin_client.post("/api/orders", json=ORDER)

    listed = admin_client.get("/api/orders")
    assert listed.status_code == 200
    assert len(listed.json()) == 1
