"""Tests for storefront sessions and the session manager."""

import asyncio
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from vrtflow.database.catalog import catalog
from vrtflow.errors import CheckoutInProgressError
from vrtflow.models.checkout import CheckoutState
from vrtflow.services.delivery_client import DeliveryClient
from vrtflow.services.storefront import SessionManager

from .conftest import DELIVERY_URL


@pytest.fixture
def sessions(delivery) -> SessionManager:
    return SessionManager(catalog=catalog, delivery=delivery, max_age_hours=24)


def age(session, hours: float) -> None:
    session.updated_at = datetime.now(timezone.utc) - timedelta(hours=hours)


async def test_edits_refused_while_sending():
    release = asyncio.Event()
    calls = []

    async def held(request):
        calls.append(request)
        await release.wait()
        return httpx.Response(200)

    delivery = DeliveryClient(DELIVERY_URL, "orders@vrtflow.test", "New Cart Submission",
                              transport=httpx.MockTransport(held))
    session = SessionManager(catalog=catalog, delivery=delivery).create_session()
    session.add_item("1")
    session.add_item("4")
    session.update_customer(name="Jane", email="jane@x.com")

    pending = asyncio.create_task(session.checkout())
    while not calls:
        await asyncio.sleep(0)

    assert session.submitter.state == CheckoutState.SENDING
    with pytest.raises(CheckoutInProgressError):
        session.add_item("2")
    with pytest.raises(CheckoutInProgressError):
        session.set_quantity("1", 5)
    with pytest.raises(CheckoutInProgressError):
        session.remove_item("4")
    with pytest.raises(CheckoutInProgressError):
        session.clear_cart()
    with pytest.raises(CheckoutInProgressError):
        session.update_customer(name="John")

    submitted = [line.id for line in session.cart.lines()]

    release.set()
    result = await pending
    await delivery.close()

    assert submitted == ["1", "4"]
    assert result.success is True
    assert [i.id for i in result.submission.items] == ["1", "4"]
    assert result.submission.customer.name == "Jane"
    assert session.cart.is_empty()


async def test_edits_allowed_after_submission_settles(sessions):
    session = sessions.create_session()

    await session.checkout()
    session.add_item("1")

    assert session.cart.line_count() == 1


async def test_one_notification_log_per_session(sessions):
    session = sessions.create_session()
    session.add_item("1")

    await session.checkout()

    assert session.notifications is session.submitter.notifier
    titles = [n.title for n in session.notifications.drain()]
    assert titles == ["Added to cart", "Missing information"]


async def test_mutations_refresh_updated_at(sessions):
    session = sessions.create_session()
    age(session, 5)
    stale = session.updated_at

    session.add_item("1")

    assert session.updated_at > stale
    age(session, 5)
    stale = session.updated_at
    await session.checkout()
    assert session.updated_at > stale


async def test_cleanup_removes_idle_sessions(sessions):
    idle = sessions.create_session()
    active = sessions.create_session()
    age(idle, 25)
    age(active, 1)

    removed = sessions.cleanup_old_sessions()

    assert removed == 1
    assert sessions.get_session(idle.session_id) is None
    assert sessions.get_session(active.session_id) is active


async def test_cleanup_keeps_sending_sessions(sessions):
    session = sessions.create_session()
    age(session, 48)
    session.submitter.state = CheckoutState.SENDING

    assert sessions.cleanup_old_sessions() == 0
    assert sessions.get_session(session.session_id) is session


async def test_create_session_drops_idle_sessions(sessions):
    created = [sessions.create_session() for _ in range(100)]
    for session in created:
        age(session, 30)

    fresh = sessions.create_session()

    assert list(sessions.sessions) == [fresh.session_id]


async def test_cleanup_with_explicit_age(sessions):
    session = sessions.create_session()
    age(session, 2)

    assert sessions.cleanup_old_sessions(max_age_hours=1) == 1
    assert sessions.sessions == {}
