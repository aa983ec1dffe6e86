"""
Checkout Router

Builds the order inquiry text from the session cart and returns the
Messenger deep link that carries it. The cart is left untouched; the
shopper can go back and edit it.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront import config
from storefront.catalog.repository import CatalogRepository
from storefront.checkout import (
    ServiceType,
    compose_inquiry_message,
    compose_order_message,
    delivery_enabled,
    effective_payment_methods,
    messenger_link,
    payment_method_name,
)
from storefront.errors import (
    CheckoutError,
    ERROR_CART_EMPTY,
    ERROR_CATALOG_UNAVAILABLE,
    ERROR_DELIVERY_DISABLED,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.money import format_money, to_float
from storefront.session import CartSession
from .deps import get_catalog_repository, get_session_view
from .models import CheckoutRequest, InquiryRequest

logger = get_logger(__name__)

router = APIRouter(tags=["checkout"])


@router.get("/checkout/options")
async def get_checkout_options(repo: CatalogRepository = Depends(get_catalog_repository)):
    """Payment methods and service types on offer."""
    try:
        methods = effective_payment_methods(await repo.get_payment_methods())
        settings = await repo.get_site_settings()
    except Exception as e:
        logger.error(f"Failed to load checkout options: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=ERROR_CATALOG_UNAVAILABLE)

    service_types = [ServiceType.PICKUP.value]
    if delivery_enabled(settings):
        service_types.append(ServiceType.DELIVERY.value)
    return {
        "payment_methods": [method.model_dump() for method in methods],
        "service_types": service_types,
    }


@router.post("/checkout")
async def checkout(
    request: CheckoutRequest,
    session: CartSession = Depends(get_session_view),
    repo: CatalogRepository = Depends(get_catalog_repository),
):
    """Compose the order inquiry for the session cart."""
    cart = session.cart
    if cart.is_empty:
        raise HTTPException(status_code=400, detail=ERROR_CART_EMPTY)

    try:
        methods = effective_payment_methods(await repo.get_payment_methods())
        settings = await repo.get_site_settings()
    except Exception as e:
        logger.error(f"Failed to load checkout settings: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=ERROR_CATALOG_UNAVAILABLE)

    if request.service_type == ServiceType.DELIVERY and not delivery_enabled(settings):
        raise HTTPException(status_code=400, detail=ERROR_DELIVERY_DISABLED)

    try:
        message = compose_order_message(
            request,
            cart.get_lines(),
            payment_method_name=payment_method_name(methods, request.payment_method),
        )
    except CheckoutError as ce:
        raise HTTPException(status_code=400, detail=str(ce))

    logger.info(
        f"Order inquiry composed for session {sanitize_id_for_logging(session.session_id)}: "
        f"{len(cart)} lines"
    )
    total = cart.get_total_price()
    return {
        "message": message,
        "url": messenger_link(message),
        "total": to_float(total),
        "total_display": format_money(total, config.CURRENCY),
    }


@router.post("/inquiry")
async def general_inquiry(request: InquiryRequest):
    """Compose a general inquiry (no cart involved)."""
    try:
        message = compose_inquiry_message(request.message, subject=request.subject)
    except CheckoutError as ce:
        raise HTTPException(status_code=400, detail=str(ce))
    return {"message": message, "url": messenger_link(message)}
