# Storage modules

from .catalog import catalog, Catalog, CATALOG
from .carts import CartStore
from .organizations import OrganizationRegistry

__all__ = [
    "catalog",
    "Catalog",
    "CATALOG",
    "CartStore",
    "OrganizationRegistry",
]
