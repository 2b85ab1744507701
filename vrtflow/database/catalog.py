"""Storefront catalog"""

from decimal import Decimal
from typing import Optional

from ..errors import UnknownCatalogItemError
from ..models.catalog import CatalogItem, ItemCategory

# Items offered on the landing page
CATALOG: tuple[CatalogItem, ...] = (
    CatalogItem(
        id="1",
        name="Rugged Field Tablet",
        category=ItemCategory.HARDWARE,
        description="10-inch drop-tested tablet preloaded with the VRTFlow staff portal for job sheets on site.",
        price=Decimal("450.00"),
        image="/static/images/field-tablet.jpg",
    ),
    CatalogItem(
        id="2",
        name="Biometric Time Clock",
        category=ItemCategory.HARDWARE,
        description="Wall-mounted fingerprint terminal that feeds clock-ins straight into time tracking.",
        price=Decimal("329.00"),
        image="/static/images/time-clock.jpg",
    ),
    CatalogItem(
        id="3",
        name="Thermal Job Ticket Printer",
        category=ItemCategory.ACCESSORIES,
        description="Bluetooth printer for job tickets and delivery dockets generated by PDF automation.",
        price=Decimal("219.50"),
        image="/static/images/ticket-printer.jpg",
    ),
    CatalogItem(
        id="4",
        name="NFC Staff Badge Pack",
        category=ItemCategory.ACCESSORIES,
        description="Pack of 25 NFC badges for tap-to-clock attendance on any supported device.",
        price=Decimal("185.75"),
        image="/static/images/nfc-badges.jpg",
    ),
    CatalogItem(
        id="5",
        name="PDF Automation Template Pack",
        category=ItemCategory.SOFTWARE,
        description="Twenty ready-made quote, invoice and compliance templates with field mapping.",
        price=Decimal("99.00"),
        image="/static/images/pdf-templates.jpg",
    ),
    CatalogItem(
        id="6",
        name="Onboarding Workshop",
        category=ItemCategory.SERVICES,
        description="Half-day remote session configuring your admin dashboard, staff roles and job workflows.",
        price=Decimal("600.00"),
        image="/static/images/onboarding.jpg",
        in_stock=False,
    ),
)


class Catalog:
    """Read-only lookup over catalog items"""

    def __init__(self, items: tuple[CatalogItem, ...] = CATALOG):
        self._items: dict[str, CatalogItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValueError(f"Duplicate catalog id: {item.id}")
            self._items[item.id] = item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    def get_item(self, item_id: str) -> Optional[CatalogItem]:
        """Get an item by ID"""
        return self._items.get(item_id)

    def require_item(self, item_id: str) -> CatalogItem:
        """Get an item by ID or raise UnknownCatalogItemError"""
        item = self._items.get(item_id)
        if item is None:
            raise UnknownCatalogItemError(item_id)
        return item

    def list_items(
        self,
        category: Optional[ItemCategory] = None,
        in_stock_only: bool = False,
    ) -> list[CatalogItem]:
        """List items in catalog order, optionally filtered"""
        results = list(self._items.values())

        if category:
            results = [i for i in results if i.category == category]

        if in_stock_only:
            results = [i for i in results if i.in_stock]

        return results


# Shared read-only instance
catalog = Catalog()
