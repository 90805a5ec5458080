import logging

import pytest


@pytest.mark.asyncio
async def test_create_order(client, caplog):
    order_payload = {
        "orderId": 1,
        "items": [{"sku": "A1", "quantity": 2}]
    }

    with caplog.at_level(logging.INFO):
        response = await client.post("/order", json=order_payload)

    assert response.status_code == 200
    assert response.json() == "Order Created Successfully"
    assert "Received order 1" in caplog.text
    assert "Sending Order 1" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [1, 500, 1000])
async def test_create_order_quantity_bounds(client, quantity):
    order_payload = {
        "orderId": 42,
        "items": [
            {"sku": "WIDGET", "quantity": quantity},
            {"sku": "GADGET", "quantity": 1},
        ]
    }

    response = await client.post("/order", json=order_payload)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_create_order_accepts_snake_case(client):
    response = await client.post("/order", json={"order_id": 7, "items": [{"sku": "B2", "quantity": 3}]})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_order_shipped(client, caplog):
    payload = {"orderId": 1, "shippingCarrier": "UPS", "trackingNumber": "1Z999"}

    with caplog.at_level(logging.INFO):
        response = await client.post("/order/shipment", json=payload)

    assert response.status_code == 200
    assert response.content == b""
    assert "Saving Shipping Info for Order 1" in caplog.text


@pytest.mark.asyncio
async def test_order_round_trip(client):
    r = await client.post("/order", json={"orderId": 5, "items": [{"sku": "A1", "quantity": 1}]})
    assert r.status_code == 200

    # Not shipped yet
    r = await client.get("/order/shipment/5")
    assert r.status_code == 404

    r = await client.post(
        "/order/shipment",
        json={"orderId": 5, "shippingCarrier": "DHL", "trackingNumber": "JD0001"}
    )
    assert r.status_code == 200

    r = await client.get("/order/shipment/5")
    assert r.status_code == 200
    assert r.json() == {"orderId": 5, "shippingCarrier": "DHL", "trackingNumber": "JD0001"}


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-Id": "corr-123"})

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "order"}
    assert response.headers["X-Correlation-Id"] == "corr-123"


@pytest.mark.asyncio
async def test_correlation_id_is_generated(client):
    response = await client.get("/health")

    assert response.headers["X-Correlation-Id"]


@pytest.mark.asyncio
async def test_openapi_document(client):
    response = await client.get("/openapi/json")

    assert response.status_code == 200
    doc = response.json()
    assert doc["info"]["title"] == "Bmazon APIs"
    assert doc["info"]["version"] == "1.0"
    assert "/order" in doc["paths"]
    assert "/order/shipment" in doc["paths"]
    assert "/order/shipment/{id}" in doc["paths"]


@pytest.mark.asyncio
async def test_openapi_ui(client):
    response = await client.get("/openapi/ui")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
