"""Cart storage for the storefront"""

from decimal import Decimal
from typing import Optional

from ..models.cart import CartLine, CartView
from ..models.catalog import CatalogItem


class CartStore:
    """
    In-memory cart for a single shopper.

    Lines are kept in insertion order, one per catalog id, and never with a
    quantity below 1. Operations report what happened through their return
    value; deciding what to tell the shopper is left to the caller.
    """

    def __init__(self):
        self._lines: dict[str, CartLine] = {}

    def add_item(self, item: CatalogItem) -> CartLine:
        """Add one unit of item, appending a new line if needed"""
        existing = self._lines.get(item.id)
        if existing:
            line = existing.with_quantity(existing.quantity + 1)
        else:
            line = CartLine.from_item(item)
        self._lines[item.id] = line
        return line

    def remove_item(self, item_id: str) -> bool:
        """Remove a line. Returns False when nothing was removed."""
        return self._lines.pop(item_id, None) is not None

    def set_quantity(self, item_id: str, quantity: int) -> Optional[CartLine]:
        """
        Set a line's quantity exactly.

        A quantity of zero or less removes the line. Unknown ids are ignored.

        Returns:
            The updated line, or None if the line is gone or never existed
        """
        if quantity <= 0:
            self.remove_item(item_id)
            return None

        existing = self._lines.get(item_id)
        if not existing:
            return None

        line = existing.with_quantity(quantity)
        self._lines[item_id] = line
        return line

    def clear(self) -> None:
        """Remove every line"""
        self._lines.clear()

    def get_line(self, item_id: str) -> Optional[CartLine]:
        return self._lines.get(item_id)

    def lines(self) -> list[CartLine]:
        """Lines in the order they were first added"""
        return list(self._lines.values())

    def total(self) -> Decimal:
        """Sum of price times quantity over all lines"""
        return sum(
            (line.price * line.quantity for line in self._lines.values()),
            Decimal("0"),
        )

    def line_count(self) -> int:
        """Number of distinct lines"""
        return len(self._lines)

    def item_count(self) -> int:
        """Sum of quantities across lines"""
        return sum(line.quantity for line in self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def view(self) -> CartView:
        return CartView(
            lines=self.lines(),
            total=self.total(),
            line_count=self.line_count(),
            item_count=self.item_count(),
        )
