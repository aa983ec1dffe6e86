"""
Storefront Session Engine

This package contains the storefront components:
- cart: session cart store, line identity, pricing, quantity badges
- catalog: catalog models, Supabase repository, browsing helpers
- checkout: order details and outbound inquiry messages
- routers: FastAPI endpoints mounted by api/index.py

Note: Imports are lazy so that the cart engine can be used without
pulling in the Supabase client or FastAPI.
"""

__all__ = [
    "CartStore",
    "CartSession",
    "get_supabase",
]


def __getattr__(name):
    """Lazy attribute access for clean module loading."""
    if name == "CartStore":
        from storefront.cart import CartStore
        return CartStore
    if name == "CartSession":
        from storefront.session import CartSession
        return CartSession
    if name == "get_supabase":
        from storefront.db import get_supabase
        return get_supabase
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
