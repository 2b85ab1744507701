"""Tests for checkout submission."""

import asyncio

import httpx
import pytest

from vrtflow.errors import CheckoutInProgressError
from vrtflow.models.checkout import CheckoutState
from vrtflow.models.customer import CustomerInfo
from vrtflow.models.notification import NotificationKind
from vrtflow.services.checkout import CheckoutSubmitter
from vrtflow.services.delivery_client import DeliveryClient

from .conftest import DELIVERY_URL, FIXED_TIMESTAMP


@pytest.fixture
def filled(cart, form, tablet, badges):
    """Cart with two lines and valid contact details"""
    cart.add_item(tablet)
    cart.add_item(tablet)
    cart.add_item(badges)
    form.update(name="Jane", email="jane@x.com")
    return cart, form


async def test_empty_cart_is_rejected(submitter, cart, handler, notifications):
    result = await submitter.submit()

    assert result.success is False
    assert result.state == CheckoutState.REJECTED
    assert result.error == "empty_cart"
    assert handler.requests == []
    assert cart.is_empty()
    assert [n.kind for n in notifications.pending()] == [NotificationKind.WARNING]
    assert submitter.state == CheckoutState.IDLE


async def test_missing_contact_info_is_rejected(submitter, cart, tablet, handler, notifications):
    cart.add_item(tablet)

    result = await submitter.submit()

    assert result.error == "missing_contact_info"
    assert result.missing_fields == ["name", "email"]
    assert handler.requests == []
    assert cart.line_count() == 1
    pending = notifications.pending()
    assert len(pending) == 1
    assert pending[0].kind == NotificationKind.WARNING
    assert "name" in pending[0].message
    assert "email" in pending[0].message


async def test_successful_submission_resets_state(submitter, filled, handler, notifications):
    cart, form = filled

    result = await submitter.submit()

    assert result.success is True
    assert result.state == CheckoutState.SUCCEEDED
    assert result.close_checkout is True
    assert cart.is_empty()
    assert form.info == CustomerInfo()
    assert [n.kind for n in notifications.pending()] == [NotificationKind.SUCCESS]
    assert len(handler.requests) == 1


async def test_submission_payload(submitter, filled, handler):
    await submitter.submit()

    request = handler.requests[0]
    assert request.method == "POST"
    assert str(request.url) == DELIVERY_URL
    assert request.headers["content-type"] == "application/json"

    body = handler.bodies[0]
    assert body["to"] == "orders@vrtflow.test"
    assert body["subject"] == "New Cart Submission"

    cart_data = body["cartData"]
    assert cart_data["total"] == 1085.75
    assert cart_data["timestamp"] == FIXED_TIMESTAMP
    assert cart_data["customer"]["name"] == "Jane"
    assert cart_data["customer"]["email"] == "jane@x.com"
    assert [(i["id"], i["quantity"]) for i in cart_data["items"]] == [("1", 2), ("4", 1)]
    assert cart_data["items"][1]["price"] == 185.75


async def test_rejected_delivery_keeps_state(submitter, filled, handler, notifications):
    cart, form = filled
    handler.status_code = 500

    result = await submitter.submit()

    assert result.success is False
    assert result.state == CheckoutState.FAILED
    assert result.error == "delivery_rejected"
    assert cart.line_count() == 2
    assert cart.item_count() == 3
    assert form.info.name == "Jane"
    assert [n.kind for n in notifications.pending()] == [NotificationKind.ERROR]
    assert submitter.state == CheckoutState.IDLE


async def test_transport_failure_matches_rejection(cart, form, filled, notifications):
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    delivery = DeliveryClient(DELIVERY_URL, "orders@vrtflow.test", "New Cart Submission",
                              transport=httpx.MockTransport(fail))
    submitter = CheckoutSubmitter(cart, form, delivery, notifications)

    result = await submitter.submit()
    await delivery.close()

    assert result.error == "transport_error"
    assert cart.line_count() == 2
    pending = notifications.pending()
    assert len(pending) == 1
    assert pending[0].title == "Submission failed"


async def test_timeout_is_transport_failure(cart, form, filled, notifications):
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    delivery = DeliveryClient(DELIVERY_URL, "orders@vrtflow.test", "New Cart Submission",
                              timeout=0.1, transport=httpx.MockTransport(slow))
    submitter = CheckoutSubmitter(cart, form, delivery, notifications)

    result = await submitter.submit()
    await delivery.close()

    assert result.error == "transport_error"
    assert result.state == CheckoutState.FAILED


async def test_retry_after_failure_succeeds(submitter, filled, handler, notifications):
    cart, _ = filled
    handler.status_code = 503
    await submitter.submit()

    handler.status_code = 200
    result = await submitter.submit()

    assert result.success is True
    assert cart.is_empty()
    assert len(handler.requests) == 2
    assert [n.kind for n in notifications.pending()] == [
        NotificationKind.ERROR,
        NotificationKind.SUCCESS,
    ]


async def test_submit_while_sending_is_refused(cart, form, filled, notifications):
    release = asyncio.Event()
    calls = []

    async def held(request):
        calls.append(request)
        await release.wait()
        return httpx.Response(200)

    delivery = DeliveryClient(DELIVERY_URL, "orders@vrtflow.test", "New Cart Submission",
                              transport=httpx.MockTransport(held))
    submitter = CheckoutSubmitter(cart, form, delivery, notifications)

    first = asyncio.create_task(submitter.submit())
    while not calls:
        await asyncio.sleep(0)

    assert submitter.state == CheckoutState.SENDING
    with pytest.raises(CheckoutInProgressError):
        await submitter.submit()

    release.set()
    result = await first
    await delivery.close()

    assert result.success is True
    assert len(calls) == 1
    assert len(notifications.pending()) == 1
