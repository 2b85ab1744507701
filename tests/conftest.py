"""Pytest configuration for tests."""

import json
from decimal import Decimal

import httpx
import pytest

from vrtflow.database.carts import CartStore
from vrtflow.database.catalog import catalog
from vrtflow.models.catalog import CatalogItem, ItemCategory
from vrtflow.services.checkout import CheckoutSubmitter
from vrtflow.services.customer_form import CustomerInfoForm
from vrtflow.services.delivery_client import DeliveryClient
from vrtflow.services.notifications import NotificationLog

DELIVERY_URL = "http://delivery.test/api/send-email"
FIXED_TIMESTAMP = "2026-01-02T03:04:05+00:00"


def make_item(item_id: str, price: str, name: str = None) -> CatalogItem:
    return CatalogItem(
        id=item_id,
        name=name or f"Item {item_id}",
        category=ItemCategory.HARDWARE,
        description="Test item",
        price=Decimal(price),
        image=f"/static/images/{item_id}.jpg",
    )


class RecordingHandler:
    """httpx mock handler that records requests and answers with a fixed status"""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"ok": self.status_code < 400})

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def tablet() -> CatalogItem:
    return catalog.require_item("1")


@pytest.fixture
def badges() -> CatalogItem:
    return catalog.require_item("4")


@pytest.fixture
def cart() -> CartStore:
    return CartStore()


@pytest.fixture
def form() -> CustomerInfoForm:
    return CustomerInfoForm()


@pytest.fixture
def notifications() -> NotificationLog:
    return NotificationLog()


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
async def delivery(handler):
    client = DeliveryClient(
        delivery_url=DELIVERY_URL,
        to="orders@vrtflow.test",
        subject="New Cart Submission",
        transport=httpx.MockTransport(handler),
    )
    yield client
    await client.close()


@pytest.fixture
def submitter(cart, form, delivery, notifications) -> CheckoutSubmitter:
    return CheckoutSubmitter(
        cart=cart,
        form=form,
        delivery=delivery,
        notifier=notifications,
        clock=lambda: FIXED_TIMESTAMP,
    )
