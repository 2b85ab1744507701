"""Catalog API routes"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..database.catalog import catalog
from ..models.catalog import CatalogItem, CatalogResponse, ItemCategory

router = APIRouter(prefix="/api/catalog", tags=["Catalog"])


@router.get("", response_model=CatalogResponse)
async def list_items(
    category: Optional[ItemCategory] = Query(None, description="Filter by category"),
    in_stock_only: bool = Query(False, description="Only show in-stock items"),
):
    """List catalog items in display order"""
    items = catalog.list_items(category=category, in_stock_only=in_stock_only)
    return CatalogResponse(items=items, total=len(items))


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all item categories"""
    return [c.value for c in ItemCategory]


@router.get("/{item_id}", response_model=CatalogItem)
async def get_item(item_id: str):
    """Get a catalog item by ID"""
    item = catalog.get_item(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item
