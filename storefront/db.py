"""
Database Module - Supabase client

Provides a lazily created async Supabase client for catalog reads.
The cart itself is in-memory and never touches the database.
"""

from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client

from storefront import config

_async_supabase_client: Optional[AsyncClient] = None


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase client (singleton).

    Raises:
        ValueError: SUPABASE_URL or SUPABASE_ANON_KEY is not set
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        if not config.SUPABASE_URL or not config.SUPABASE_ANON_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        _async_supabase_client = await acreate_client(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)

    return _async_supabase_client
