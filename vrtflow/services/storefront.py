"""Storefront sessions"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..database.carts import CartStore
from ..database.catalog import Catalog
from ..errors import CheckoutInProgressError
from ..models.cart import CartLine
from ..models.checkout import CheckoutResult
from ..models.customer import CustomerInfo
from ..models.notification import NotificationKind
from ..models.session import SessionResponse
from .checkout import CheckoutSubmitter
from .customer_form import CustomerInfoForm
from .delivery_client import DeliveryClient
from .notifications import NotificationLog

logger = logging.getLogger(__name__)


@dataclass
class StorefrontSession:
    """
    One shopper's cart, contact form and checkout.

    Sits between the UI and the core objects: it looks up catalog items,
    emits the "added to cart" notification and refuses edits while a
    submission is in flight.
    """
    session_id: str
    created_at: datetime
    updated_at: datetime
    catalog: Catalog
    submitter: CheckoutSubmitter

    @property
    def cart(self) -> CartStore:
        return self.submitter.cart

    @property
    def form(self) -> CustomerInfoForm:
        return self.submitter.form

    @property
    def notifications(self) -> NotificationLog:
        """The submitter's sink, shared so every message lands in one log"""
        return self.submitter.notifier

    def touch(self) -> None:
        """Mark the session as active"""
        self.updated_at = datetime.now(timezone.utc)

    def _ensure_editable(self) -> None:
        if self.submitter.is_sending:
            raise CheckoutInProgressError()
        self.touch()

    def add_item(self, item_id: str) -> CartLine:
        self._ensure_editable()
        item = self.catalog.require_item(item_id)
        line = self.cart.add_item(item)
        self.notifications.notify(
            NotificationKind.SUCCESS,
            "Added to cart",
            f"{item.name} has been added to your cart.",
        )
        return line

    def remove_item(self, item_id: str) -> bool:
        self._ensure_editable()
        return self.cart.remove_item(item_id)

    def set_quantity(self, item_id: str, quantity: int) -> Optional[CartLine]:
        self._ensure_editable()
        return self.cart.set_quantity(item_id, quantity)

    def clear_cart(self) -> None:
        self._ensure_editable()
        self.cart.clear()

    def update_customer(self, **fields: Optional[str]) -> CustomerInfo:
        self._ensure_editable()
        return self.form.update(**fields)

    async def checkout(self) -> CheckoutResult:
        self.touch()
        result = await self.submitter.submit()
        self.touch()
        return result

    def snapshot(self) -> SessionResponse:
        return SessionResponse(
            session_id=self.session_id,
            created_at=self.created_at,
            cart=self.cart.view(),
            customer=self.form.info,
            checkout_state=self.submitter.state,
        )


class SessionManager:
    """Manages storefront sessions"""

    def __init__(
        self,
        catalog: Catalog,
        delivery: DeliveryClient,
        max_age_hours: float = 24,
    ):
        self.catalog = catalog
        self.delivery = delivery
        self.max_age_hours = max_age_hours
        self.sessions: dict[str, StorefrontSession] = {}

    def create_session(self) -> StorefrontSession:
        """Create a new session with an empty cart and form"""
        self.cleanup_old_sessions()

        submitter = CheckoutSubmitter(
            cart=CartStore(),
            form=CustomerInfoForm(),
            delivery=self.delivery,
            notifier=NotificationLog(),
        )
        now = datetime.now(timezone.utc)
        session = StorefrontSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            catalog=self.catalog,
            submitter=submitter,
        )
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[StorefrontSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: Optional[float] = None) -> int:
        """Remove sessions idle for longer than max_age_hours"""
        if max_age_hours is None:
            max_age_hours = self.max_age_hours

        now = datetime.now(timezone.utc)
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if not session.submitter.is_sending
            and (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            del self.sessions[sid]

        if old_sessions:
            logger.info(f"Removed {len(old_sessions)} idle sessions")
        return len(old_sessions)
