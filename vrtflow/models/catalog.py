"""Catalog models for the storefront"""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Amounts stay exact in memory and go over the wire as JSON numbers.
# Floats hold every cent exactly only up to about 9e13, hence MAX_PRICE.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

MAX_PRICE = Decimal("1000000000.00")


class ItemCategory(str, Enum):
    HARDWARE = "hardware"
    ACCESSORIES = "accessories"
    SOFTWARE = "software"
    SERVICES = "services"


class CatalogItem(BaseModel):
    """Purchasable item on the landing page"""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: str
    category: ItemCategory
    description: str
    price: Money = Field(ge=0, le=MAX_PRICE, decimal_places=2)
    image: str
    in_stock: bool = True


class CatalogResponse(BaseModel):
    """Catalog listing response"""
    items: list[CatalogItem]
    total: int
