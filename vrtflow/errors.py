"""Storefront exceptions"""

from typing import Optional


class StorefrontError(Exception):
    """Base class for storefront errors"""

    code = "storefront_error"


class UnknownCatalogItemError(StorefrontError):
    """Requested item is not in the catalog"""

    code = "unknown_item"

    def __init__(self, item_id: str):
        super().__init__(f"Catalog item not found: {item_id}")
        self.item_id = item_id


class CheckoutError(StorefrontError):
    """Base class for checkout failures"""

    code = "checkout_error"


class EmptyCartError(CheckoutError):
    """Submit was attempted with nothing in the cart"""

    code = "empty_cart"

    def __init__(self):
        super().__init__("Cart is empty")


class MissingContactInfoError(CheckoutError):
    """Required contact fields are blank"""

    code = "missing_contact_info"

    def __init__(self, missing_fields: list[str]):
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = list(missing_fields)


class DeliveryRejectedError(CheckoutError):
    """Delivery endpoint answered with a non-success status"""

    code = "delivery_rejected"

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Delivery endpoint returned {status_code}")
        self.status_code = status_code
        self.body = body


class TransportError(CheckoutError):
    """Delivery request could not complete (network error or timeout)"""

    code = "transport_error"


class CheckoutInProgressError(CheckoutError):
    """A submission for this session is still in flight"""

    code = "checkout_in_progress"

    def __init__(self):
        super().__init__("A submission is already in progress")
