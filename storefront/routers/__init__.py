"""
FastAPI Routers Package

All routers are mounted under /api by api/index.py.
"""

from storefront.routers.catalog import router as catalog_router
from storefront.routers.cart import router as cart_router
from storefront.routers.checkout import router as checkout_router

__all__ = [
    "catalog_router",
    "cart_router",
    "checkout_router",
]
