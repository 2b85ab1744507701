"""Storefront session API routes: cart, customer info and checkout"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..errors import CheckoutInProgressError, UnknownCatalogItemError
from ..models.cart import AddToCartRequest, CartResponse, SetQuantityRequest
from ..models.checkout import CheckoutResult
from ..models.customer import CustomerInfo, CustomerInfoUpdate
from ..models.session import NotificationsResponse, SessionResponse
from ..services.storefront import SessionManager, StorefrontSession
from .dependencies import get_session_manager, get_storefront_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])

IN_PROGRESS_DETAIL = "A submission is in progress; try again when it completes"


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(sessions: SessionManager = Depends(get_session_manager)):
    """Start a shopping session with an empty cart"""
    session = sessions.create_session()
    return session.snapshot()


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session: StorefrontSession = Depends(get_storefront_session)):
    """Get the current cart, customer info and checkout state"""
    return session.snapshot()


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
):
    """Discard a session"""
    if not sessions.delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)


@router.post("/{session_id}/cart/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: StorefrontSession = Depends(get_storefront_session),
):
    """Add one unit of a catalog item to the cart"""
    try:
        line = session.add_item(request.item_id)
    except UnknownCatalogItemError:
        raise HTTPException(status_code=404, detail="Item not found")
    except CheckoutInProgressError:
        raise HTTPException(status_code=409, detail=IN_PROGRESS_DETAIL)

    return CartResponse(
        cart=session.cart.view(),
        message=f"Added {line.name} to cart",
    )


@router.put("/{session_id}/cart/items/{item_id}", response_model=CartResponse)
async def set_quantity(
    item_id: str,
    request: SetQuantityRequest,
    session: StorefrontSession = Depends(get_storefront_session),
):
    """Set a line's quantity; zero or less removes it"""
    try:
        line = session.set_quantity(item_id, request.quantity)
    except CheckoutInProgressError:
        raise HTTPException(status_code=409, detail=IN_PROGRESS_DETAIL)

    message = "Cart updated" if line else "Item not in cart"
    return CartResponse(cart=session.cart.view(), message=message)


@router.delete("/{session_id}/cart/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(
    item_id: str,
    session: StorefrontSession = Depends(get_storefront_session),
):
    """Remove a line from the cart"""
    try:
        removed = session.remove_item(item_id)
    except CheckoutInProgressError:
        raise HTTPException(status_code=409, detail=IN_PROGRESS_DETAIL)

    message = "Item removed" if removed else "Item not in cart"
    return CartResponse(cart=session.cart.view(), message=message)


@router.delete("/{session_id}/cart", response_model=CartResponse)
async def clear_cart(session: StorefrontSession = Depends(get_storefront_session)):
    """Clear all items from cart"""
    try:
        session.clear_cart()
    except CheckoutInProgressError:
        raise HTTPException(status_code=409, detail=IN_PROGRESS_DETAIL)

    return CartResponse(cart=session.cart.view(), message="Cart cleared")


@router.patch("/{session_id}/customer", response_model=CustomerInfo)
async def update_customer(
    request: CustomerInfoUpdate,
    session: StorefrontSession = Depends(get_storefront_session),
):
    """Update customer fields; fields left out keep their value"""
    try:
        return session.update_customer(**request.model_dump())
    except CheckoutInProgressError:
        raise HTTPException(status_code=409, detail=IN_PROGRESS_DETAIL)


@router.post("/{session_id}/checkout", response_model=CheckoutResult)
async def checkout(session: StorefrontSession = Depends(get_storefront_session)):
    """
    Submit the cart and customer info to the delivery endpoint.

    Validation and delivery failures are reported in the body with
    success=false; only a submission already in flight is an HTTP error.
    """
    try:
        result = await session.checkout()
    except CheckoutInProgressError:
        raise HTTPException(status_code=409, detail=IN_PROGRESS_DETAIL)

    logger.info(
        f"Checkout for session {session.session_id}: "
        f"{'delivered' if result.success else result.error}"
    )
    return result


@router.get("/{session_id}/notifications", response_model=NotificationsResponse)
async def get_notifications(session: StorefrontSession = Depends(get_storefront_session)):
    """Collect pending notifications; each is returned once"""
    return NotificationsResponse(notifications=session.notifications.drain())
