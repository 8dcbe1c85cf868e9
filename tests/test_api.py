# tests/test_api.py
import json

import pytest
from fastapi.testclient import TestClient

from cartly.domain.schemas import CartMutationResult
from cartly.main import create_app
from cartly.utils.settings import CART_STORAGE_KEY, THEME_STORAGE_KEY

PRODUCT_ID = "gid://shopify/Product/10"
V1 = "gid://shopify/ProductVariant/10"


@pytest.fixture
def client(session):
    with TestClient(create_app(session)) as test_client:
        yield test_client


def _add(client, quantity=1, variant_id=V1):
    return client.post("/cart/items", json={"product_id": PRODUCT_ID, "variant_id": variant_id, "quantity": quantity})


def test_health_and_catalog_loaded_on_startup(client):
    body = client.get("/health").json()
    assert body == {"status": "ok", "online": True, "products": 1}

    products = client.get("/products").json()
    assert [p["id"] for p in products] == [PRODUCT_ID]
    assert products[0]["variants"][0]["price"]["amount"] == "25.50"


def test_filters_endpoints(client):
    assert client.get("/products/tags").json() == ["bags", "eco"]

    client.put("/filters/search", json={"query": "lamp"})
    assert client.get("/products").json() == []

    client.delete("/filters")
    client.post("/filters/tags/eco/toggle")
    assert [p["id"] for p in client.get("/products").json()] == [PRODUCT_ID]

    assert client.put("/filters/tags", json={"tags": ["shoes"]}).json() == {"selected_tags": ["shoes"]}
    assert client.get("/products").json() == []


def test_get_product_and_missing(client, analytics):
    assert client.get(f"/products/{PRODUCT_ID}").json()["title"] == "Canvas Tote"
    assert client.get("/products/gid://shopify/Product/404").status_code == 404
    assert analytics.names() == ["product_viewed"]


def test_cart_flow(client, redis_client):
    body = _add(client, 2).json()
    assert body["item_count"] == 2
    assert body["total"] == "51.00"

    stored = json.loads(redis_client.get(CART_STORAGE_KEY))
    assert stored[0]["quantity"] == 2

    body = client.post(f"/cart/items/{V1}/save-for-later").json()
    assert body["item_count"] == 0
    assert body["items"] == []
    assert body["saved_items"][0]["variantId"] == V1

    body = _add(client, 1).json()
    assert body["item_count"] == 1
    assert len(body["saved_items"]) == 1

    body = client.patch(f"/cart/items/{V1}", json={"quantity": -5}).json()
    assert body["items"] == []

    body = client.delete(f"/cart/items/{V1}").json()
    assert body["saved_items"] == []


def test_add_unknown_product_or_variant(client):
    resp = client.post("/cart/items", json={"product_id": "nope", "variant_id": V1})
    assert resp.status_code == 404

    resp = _add(client, variant_id="gid://shopify/ProductVariant/999")
    assert resp.status_code == 404
    assert client.get("/cart/").json()["items"] == []
    assert client.get("/session/notifications").json() == []


def test_add_rejects_zero_quantity(client):
    assert _add(client, 0).status_code == 422


def test_checkout_success_closes_cart(client, storefront):
    storefront.cart_result = CartMutationResult.model_validate(
        {"cart": {"id": "gid://shopify/Cart/9", "checkoutUrl": "https://checkout/9"}, "userErrors": []}
    )
    _add(client, 1)
    client.post("/cart/toggle")

    assert client.post("/cart/checkout").json() == {"checkout_url": "https://checkout/9"}

    cart = client.get("/cart/").json()
    assert cart["is_open"] is False
    assert cart["cart_id"] == "gid://shopify/Cart/9"
    messages = [n["message"] for n in client.get("/session/notifications").json()]
    assert messages[-1] == "Redirecting to checkout..."


def test_checkout_failure_returns_no_url(client):
    assert client.post("/cart/checkout").json() == {"checkout_url": None}

    notes = client.get("/session/notifications").json()
    assert notes[-1]["kind"] == "error"
    assert notes[-1]["message"] == "Checkout failed: Checkout URL not found"


def test_notifications_endpoints(client, scheduler):
    created = client.post("/session/notifications", json={"kind": "success", "message": "Hi"})
    assert created.status_code == 201
    note_id = created.json()["id"]

    assert client.delete(f"/session/notifications/{note_id}").status_code == 204
    assert client.get("/session/notifications").json() == []

    client.post("/session/notifications", json={"message": "Expiring"})
    scheduler.advance(3000)
    assert client.get("/session/notifications").json() == []


def test_theme_and_connectivity(client, redis_client):
    assert client.post("/session/theme/toggle").json() == {"is_dark_mode": True}
    assert redis_client.get(THEME_STORAGE_KEY) == "true"

    assert client.post("/session/connectivity/offline").json() == {"is_online": False}
    assert client.post("/session/connectivity/online").json() == {"is_online": True}

    state = client.get("/session/state").json()
    assert state["isDarkMode"] is True
    assert state["isOnline"] is True


def test_persisted_state_restored_on_startup(session, redis_client):
    redis_client.set(THEME_STORAGE_KEY, "true")
    redis_client.set(
        CART_STORAGE_KEY,
        json.dumps([
            {
                "variantId": V1,
                "productId": PRODUCT_ID,
                "title": "Canvas Tote",
                "variant": "Natural",
                "price": "25.50",
                "quantity": 3,
                "image": "",
                "availableForSale": True,
                "savedForLater": False,
            }
        ]),
    )

    with TestClient(create_app(session)) as client:
        cart = client.get("/cart/").json()
        assert cart["item_count"] == 3
        assert client.get("/session/state").json()["isDarkMode"] is True
