"""
Cart Router

Session cart endpoints. All amounts are Decimal internally and floats in
responses; `total_display` carries the formatted string.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront import config
from storefront.cart import CartStore, SelectedAddOn, quantity_in_cart_for_default
from storefront.catalog.models import CatalogItem
from storefront.catalog.repository import CatalogRepository
from storefront.errors import (
    CartValidationError,
    ERROR_CATALOG_UNAVAILABLE,
    ERROR_ITEM_NOT_FOUND,
    ERROR_UNKNOWN_ADD_ON,
    ERROR_UNKNOWN_VARIATION,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.money import format_money
from storefront.session import CartSession
from .deps import get_cart_session, get_catalog_repository, get_session_view
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def format_cart_response(session: CartSession) -> dict:
    """Cart summary plus session id and display total."""
    cart: CartStore = session.cart
    response = cart.summary()
    response["session_id"] = session.session_id
    response["currency"] = config.CURRENCY
    response["total_display"] = format_money(cart.get_total_price(), config.CURRENCY)
    return response


async def _load_item(repo: CatalogRepository, item_id: str) -> CatalogItem:
    try:
        item = await repo.get_item(item_id)
    except Exception as e:
        logger.error(f"Failed to load catalog item {sanitize_id_for_logging(item_id)}: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=ERROR_CATALOG_UNAVAILABLE)
    if item is None:
        raise HTTPException(status_code=404, detail=ERROR_ITEM_NOT_FOUND)
    return item


def _resolve_selection(item: CatalogItem, request: AddToCartRequest):
    """Turn request ids into the item's own variation and add-on records."""
    variation = None
    if request.variation_id:
        variation = item.find_variation(request.variation_id)
        if variation is None:
            raise CartValidationError(ERROR_UNKNOWN_VARIATION)

    add_ons = []
    for entry in request.add_ons:
        add_on = item.find_add_on(entry.id)
        if add_on is None:
            raise CartValidationError(ERROR_UNKNOWN_ADD_ON)
        add_ons.append(SelectedAddOn(add_on=add_on, count=entry.count))
    return variation, add_ons


@router.get("/cart")
async def get_cart(session: CartSession = Depends(get_session_view)):
    """Current session cart."""
    return format_cart_response(session)


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    session: CartSession = Depends(get_cart_session),
    repo: CatalogRepository = Depends(get_catalog_repository),
):
    """Add a selection; identical selections merge into one line."""
    item = await _load_item(repo, request.item_id)

    try:
        variation, add_ons = _resolve_selection(item, request)
        line = session.cart.add_item(
            item,
            quantity=request.quantity,
            variation=variation,
            add_ons=add_ons,
            separate_marker=request.separate_marker,
        )
    except CartValidationError as ve:
        raise HTTPException(status_code=400, detail=str(ve))

    response = format_cart_response(session)
    response["line_id"] = line.id
    return response


@router.patch("/cart/item")
async def update_cart_item(
    request: UpdateCartItemRequest,
    session: CartSession = Depends(get_session_view),
):
    """Set a line's quantity (0 = remove). Unknown lines are ignored."""
    try:
        session.cart.update_quantity(request.line_id, request.quantity)
    except CartValidationError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return format_cart_response(session)


@router.delete("/cart/item")
async def remove_cart_item(line_id: str, session: CartSession = Depends(get_session_view)):
    """Remove a line."""
    session.cart.remove_item(line_id)
    return format_cart_response(session)


@router.post("/cart/clear")
async def clear_cart(session: CartSession = Depends(get_session_view)):
    """Remove every line."""
    session.cart.clear()
    return format_cart_response(session)


@router.get("/cart/quantity/{item_id}")
async def get_default_quantity(item_id: str, session: CartSession = Depends(get_session_view)):
    """Units of the item's plain configuration in the cart (browsing badge)."""
    return {
        "item_id": item_id,
        "quantity": quantity_in_cart_for_default(item_id, session.cart.get_lines()),
        "total_items": session.cart.get_total_items(),
    }
