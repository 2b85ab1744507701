"""Cart models for the storefront"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from .catalog import CatalogItem, Money


class CartLine(CatalogItem):
    """Catalog item together with the quantity the shopper wants"""
    quantity: int = Field(default=1, ge=1)

    @computed_field
    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

    @classmethod
    def from_item(cls, item: CatalogItem, quantity: int = 1) -> "CartLine":
        return cls(**item.model_dump(), quantity=quantity)

    def with_quantity(self, quantity: int) -> "CartLine":
        return self.model_copy(update={"quantity": quantity})


class CartView(BaseModel):
    """Snapshot of a cart as shown in the UI"""
    lines: list[CartLine] = []
    total: Money = Decimal("0")
    line_count: int = 0
    item_count: int = 0


class AddToCartRequest(BaseModel):
    """Request to add one unit of a catalog item"""
    item_id: str


class SetQuantityRequest(BaseModel):
    """Request to set a line's quantity; zero or less removes the line"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    cart: CartView
    message: Optional[str] = None
