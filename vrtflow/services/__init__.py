# Storefront services

from .customer_form import CustomerInfoForm
from .notifications import NotificationSink, NotificationLog
from .delivery_client import DeliveryClient
from .checkout import CheckoutSubmitter
from .storefront import StorefrontSession, SessionManager

__all__ = [
    "CustomerInfoForm",
    "NotificationSink",
    "NotificationLog",
    "DeliveryClient",
    "CheckoutSubmitter",
    "StorefrontSession",
    "SessionManager",
]
