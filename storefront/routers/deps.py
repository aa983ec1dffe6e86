"""
Shared Dependencies for Routers

Catalog access and session lookup, injected with FastAPI Depends so tests
can override them.
"""
from fastapi import Request, Response

from storefront import config
from storefront.catalog.repository import CatalogRepository
from storefront.session import CartSession, SessionRegistry


async def get_catalog_repository() -> CatalogRepository:
    """Catalog repository over the shared Supabase client (lazy loaded)."""
    from storefront.db import get_supabase
    client = await get_supabase()
    return CatalogRepository(client)


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_cart_session(request: Request, response: Response) -> CartSession:
    """
    Session for a cart-mutating request.

    The session id travels in the session header. A request without one, or
    with an id that is unknown or expired, starts a new session under a
    server-issued id. The id is echoed back so the client can keep using it.
    """
    registry = get_session_registry(request)
    session = registry.get_or_start(request.headers.get(config.SESSION_HEADER))
    response.headers[config.SESSION_HEADER] = session.session_id
    return session


def get_session_view(request: Request, response: Response) -> CartSession:
    """
    Session for a read-only request.

    Never starts a session: without a live one the request sees an empty,
    unregistered cart and no session header is returned.
    """
    registry = get_session_registry(request)
    session = registry.get(request.headers.get(config.SESSION_HEADER))
    if session is None:
        return CartSession.detached()
    response.headers[config.SESSION_HEADER] = session.session_id
    return session
