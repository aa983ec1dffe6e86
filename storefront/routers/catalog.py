"""
Catalog Router

Browsing endpoints. Each item carries the plain-configuration quantity
already in the session cart and the state of its add button.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import default_quantities
from storefront.catalog.browse import (
    button_state,
    category_label,
    default_variation,
    group_add_ons,
    search_items,
)
from storefront.catalog.models import CatalogItem
from storefront.catalog.repository import CatalogRepository
from storefront.errors import ERROR_CATALOG_UNAVAILABLE, ERROR_ITEM_NOT_FOUND
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.money import to_float
from storefront.session import CartSession
from .deps import get_catalog_repository, get_session_view

logger = get_logger(__name__)

router = APIRouter(tags=["catalog"])


def format_item(item: CatalogItem, quantity_in_cart: int) -> dict:
    preselected = default_variation(item)
    return {
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "category": item.category,
        "image_url": item.image_url,
        "popular": item.popular,
        "available": item.available,
        "base_price": to_float(item.base_price),
        "price": to_float(item.price),
        "discounted": item.effective_price is not None,
        "variations": [
            {"id": v.id, "name": v.name, "price_delta": to_float(v.price_delta)}
            for v in item.variations
        ],
        "default_variation_id": preselected.id if preselected else None,
        "add_on_groups": [
            {
                "category": category,
                "label": category_label(category),
                "add_ons": [
                    {"id": a.id, "name": a.name, "price": to_float(a.price)}
                    for a in add_ons
                ],
            }
            for category, add_ons in group_add_ons(item.add_ons).items()
        ],
        "quantity_in_cart": quantity_in_cart,
        "button": button_state(item, quantity_in_cart),
    }


@router.get("/catalog")
async def get_catalog(
    category: Optional[str] = None,
    q: Optional[str] = None,
    session: CartSession = Depends(get_session_view),
    repo: CatalogRepository = Depends(get_catalog_repository),
):
    """Catalog items filtered by category and search query."""
    try:
        items = await repo.get_items(category=category)
    except Exception as e:
        logger.error(f"Failed to load catalog (q={sanitize_string_for_logging(q)}): {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=ERROR_CATALOG_UNAVAILABLE)

    items = search_items(items, q)
    quantities = default_quantities(session.cart.get_lines())
    return {
        "items": [format_item(item, quantities.get(item.id, 0)) for item in items],
        "total_items": session.cart.get_total_items(),
    }


@router.get("/catalog/categories")
async def get_categories(repo: CatalogRepository = Depends(get_catalog_repository)):
    """Active categories in display order."""
    try:
        categories = await repo.get_categories()
    except Exception as e:
        logger.error(f"Failed to load categories: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=ERROR_CATALOG_UNAVAILABLE)
    return [category.model_dump() for category in categories]


@router.get("/catalog/{item_id}")
async def get_catalog_item(
    item_id: str,
    session: CartSession = Depends(get_session_view),
    repo: CatalogRepository = Depends(get_catalog_repository),
):
    """Single item with its customization options."""
    try:
        item = await repo.get_item(item_id)
    except Exception as e:
        logger.error(f"Failed to load catalog item: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=ERROR_CATALOG_UNAVAILABLE)
    if item is None:
        raise HTTPException(status_code=404, detail=ERROR_ITEM_NOT_FOUND)

    quantities = default_quantities(session.cart.get_lines())
    return format_item(item, quantities.get(item.id, 0))
