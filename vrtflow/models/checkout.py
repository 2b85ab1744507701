"""Checkout models for the storefront"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .cart import CartLine
from .catalog import Money
from .customer import CustomerInfo
from .notification import Notification


class CheckoutState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Submission(BaseModel):
    """Cart plus contact details, built at submit time"""
    customer: CustomerInfo
    items: list[CartLine]
    total: Money
    timestamp: str


class DeliveryRequest(BaseModel):
    """Body posted to the delivery endpoint"""
    to: str
    subject: str
    cart_data: Submission = Field(serialization_alias="cartData")


class CheckoutResult(BaseModel):
    """Outcome of one submit attempt"""
    success: bool
    state: CheckoutState
    notification: Notification
    error: Optional[str] = None
    missing_fields: list[str] = []
    submission: Optional[Submission] = None
    close_checkout: bool = False
