"""Storefront session models"""

from datetime import datetime

from pydantic import BaseModel

from .cart import CartView
from .checkout import CheckoutState
from .customer import CustomerInfo
from .notification import Notification


class SessionResponse(BaseModel):
    """Snapshot of a shopper's session"""
    session_id: str
    created_at: datetime
    cart: CartView
    customer: CustomerInfo
    checkout_state: CheckoutState


class NotificationsResponse(BaseModel):
    """Notifications drained from a session"""
    notifications: list[Notification]
