# Storefront Models

from .catalog import CatalogItem, CatalogResponse, ItemCategory, Money
from .cart import CartLine, CartView, AddToCartRequest, SetQuantityRequest, CartResponse
from .customer import CustomerInfo, CustomerInfoUpdate, ValidationResult
from .notification import Notification, NotificationKind
from .checkout import CheckoutState, Submission, DeliveryRequest, CheckoutResult
from .organization import Organization, OrganizationCreateRequest, OrganizationUpdateRequest
from .session import SessionResponse, NotificationsResponse

__all__ = [
    "CatalogItem",
    "CatalogResponse",
    "ItemCategory",
    "Money",
    "CartLine",
    "CartView",
    "AddToCartRequest",
    "SetQuantityRequest",
    "CartResponse",
    "CustomerInfo",
    "CustomerInfoUpdate",
    "ValidationResult",
    "Notification",
    "NotificationKind",
    "CheckoutState",
    "Submission",
    "DeliveryRequest",
    "CheckoutResult",
    "Organization",
    "OrganizationCreateRequest",
    "OrganizationUpdateRequest",
    "SessionResponse",
    "NotificationsResponse",
]
