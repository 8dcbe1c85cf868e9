# tests/conftest.py
from decimal import Decimal
from typing import Any, Dict, List

import fakeredis
import pytest
import requests

from cartly.celery_worker import celery_app
from cartly.domain.schemas import CartLineItem, CartMutationResult, Product
from cartly.repos.storage_repo import StorageRepo
from cartly.services.analytics_service import AnalyticsService
from cartly.services.cart_service import CartService
from cartly.services.notification_service import NotificationService
from cartly.services.store import Store
from cartly.session import Session


# =====================================================
# TIMERY / ZEGAR
# =====================================================
class ManualTimer:
    def __init__(self, due: int, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Zegar i timery sterowane recznie - advance(ms) odpala timery po kolei."""

    def __init__(self, start: int = 0):
        self.now = start
        self.timers: List[ManualTimer] = []

    def clock(self) -> int:
        return self.now

    def call_later(self, seconds: float, callback) -> ManualTimer:
        timer = ManualTimer(self.now + round(seconds * 1000), callback)
        self.timers.append(timer)
        return timer

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [t for t in self.timers if not t.cancelled and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.timers.remove(timer)
            self.now = timer.due
            timer.callback()
        self.now = target

    def active(self) -> List[ManualTimer]:
        return [t for t in self.timers if not t.cancelled]


# =====================================================
# STUBY
# =====================================================
class RecordingAnalytics(AnalyticsService):
    def __init__(self):
        self.events: List[tuple[str, Dict[str, Any]]] = []

    def track(self, event: str, payload: Dict[str, Any]) -> None:
        self.events.append((event, payload))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]


class StubStorefrontClient:
    """Zastepuje StorefrontClient - zwraca przygotowane odpowiedzi albo rzuca wyjatek."""

    def __init__(self, products=None, cart_result=None, error: Exception | None = None):
        self.products = products if products is not None else []
        self.cart_result = cart_result
        self.error = error
        self.calls: List[tuple[str, Any]] = []

    def get_products(self, first: int = 20, query: str | None = None):
        self.calls.append(("get_products", first))
        if self.error:
            raise self.error
        return list(self.products)

    def create_cart(self, lines):
        self.calls.append(("create_cart", list(lines)))
        if self.error:
            raise self.error
        return self.cart_result or CartMutationResult()


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP error! status: {self.status_code}", response=self)

    def json(self):
        return self.payload


class FakeSession:
    """Podmiana requests.Session - kolejne odpowiedzi (albo wyjatki) z listy."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.requests.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_product(
    product_id: str = "gid://shopify/Product/10",
    title: str = "Canvas Tote",
    tags=("bags", "eco"),
    variants=None,
    description: str = "A sturdy everyday tote bag.",
    images=None,
) -> Product:
    if variants is None:
        variants = [
            {
                "id": "gid://shopify/ProductVariant/10",
                "title": "Natural",
                "price": {"amount": "25.50", "currencyCode": "USD"},
                "compareAtPrice": {"amount": "30.00", "currencyCode": "USD"},
                "availableForSale": True,
                "selectedOptions": [{"name": "Color", "value": "Natural"}],
            },
            {
                "id": "gid://shopify/ProductVariant/11",
                "title": "Black",
                "price": {"amount": "27.00", "currencyCode": "USD"},
                "availableForSale": False,
                "image": {"id": "img-black", "url": "https://cdn.example.com/tote-black.jpg"},
            },
        ]
    if images is None:
        images = [{"id": "img-1", "url": "https://cdn.example.com/tote.jpg", "altText": "Tote"}]

    return Product.model_validate(
        {
            "id": product_id,
            "title": title,
            "handle": title.lower().replace(" ", "-"),
            "description": description,
            "descriptionHtml": f"<p>{description}</p>",
            "tags": list(tags),
            "vendor": "Cartly",
            "productType": "Accessories",
            "images": {"edges": [{"node": image} for image in images]},
            "variants": {"edges": [{"node": variant} for variant in variants]},
        }
    )


def make_item(
    variant_id: str = "v1",
    quantity: int = 1,
    price: str = "10.00",
    saved: bool = False,
) -> CartLineItem:
    return CartLineItem(
        variant_id=variant_id,
        product_id="p1",
        title="Item",
        variant="Default",
        price=Decimal(price),
        quantity=quantity,
        saved_for_later=saved,
    )


# =====================================================
# FIXTURES
# =====================================================
@pytest.fixture(autouse=True)
def celery_eager():
    celery_app.conf.task_always_eager = True
    yield
    celery_app.conf.task_always_eager = False


@pytest.fixture
def scheduler():
    return ManualScheduler(start=1_000_000)


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def analytics():
    return RecordingAnalytics()


@pytest.fixture
def notifications(store, scheduler):
    service = NotificationService(store, clock=scheduler.clock, timer_factory=scheduler.call_later)
    yield service
    service.close()


@pytest.fixture
def cart(store, notifications, analytics):
    return CartService(store, notifications, analytics)


@pytest.fixture
def product():
    return make_product()


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def storage(redis_client):
    return StorageRepo(client=redis_client)


@pytest.fixture
def storefront(product):
    return StubStorefrontClient(products=[product])


@pytest.fixture
def session(storage, storefront, analytics, scheduler):
    current = Session(
        storage=storage,
        client=storefront,
        analytics=analytics,
        clock=scheduler.clock,
        timer_factory=scheduler.call_later,
    )
    yield current
    current.close()
