"""
Storefront - Main FastAPI Application

Single entry point for the browsing, cart and checkout API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront import config
from storefront.logging import get_logger
from storefront.routers import cart_router, catalog_router, checkout_router
from storefront.session import SessionRegistry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    yield
    # Carts are session state only; drop them on shutdown
    logger.info(f"Shutting down with {len(app.state.sessions)} live sessions")
    app.state.sessions = SessionRegistry(idle_timeout=config.SESSION_IDLE_TIMEOUT)


app = FastAPI(
    title="Storefront",
    description="Catalog browsing, session cart and order inquiry API",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.sessions = SessionRegistry(idle_timeout=config.SESSION_IDLE_TIMEOUT)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[config.SESSION_HEADER],
)

app.include_router(catalog_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(checkout_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}


@app.delete("/api/session")
async def end_session(request: Request):
    """Discard the session named in the session header, and its cart."""
    session_id = request.headers.get(config.SESSION_HEADER)
    return {"ended": app.state.sessions.end(session_id)}
