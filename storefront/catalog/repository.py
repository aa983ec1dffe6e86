"""Catalog Repository - read-only catalog lookups over Supabase."""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client
from supabase._async.client import AsyncClient

from storefront.logging import get_logger, sanitize_id_for_logging
from .models import AddOn, CatalogItem, Category, PaymentMethod, Variation

logger = get_logger(__name__)

ITEM_SELECT = "*, variations(*), add_ons(*)"


class BaseRepository:
    """Base class for repositories.

    Accepts either sync Client or AsyncClient.
    All methods await the query's execute().
    """

    def __init__(self, client: Client | AsyncClient) -> None:
        self.client = client


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def discount_in_effect(row: Dict[str, Any], now: Optional[datetime] = None) -> bool:
    """True when the row's discount is switched on and inside its date window."""
    if not row.get("discount_active") or row.get("discount_price") is None:
        return False

    now = now or datetime.now(timezone.utc)
    starts = _parse_timestamp(row.get("discount_start_date"))
    ends = _parse_timestamp(row.get("discount_end_date"))
    if starts and now < starts:
        return False
    if ends and now > ends:
        return False
    return True


def item_from_row(row: Dict[str, Any], now: Optional[datetime] = None) -> CatalogItem:
    """Map a menu_items row (with embedded variations and add_ons) to a CatalogItem."""
    return CatalogItem(
        id=str(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
        base_price=row["base_price"],
        effective_price=row["discount_price"] if discount_in_effect(row, now) else None,
        available=row.get("available", True),
        category=row.get("category") or "",
        popular=row.get("popular", False),
        image_url=row.get("image_url"),
        variations=[Variation(**v) for v in row.get("variations") or []],
        add_ons=[AddOn(**a) for a in row.get("add_ons") or []],
    )


class CatalogRepository(BaseRepository):
    """Catalog database operations."""

    async def get_items(self, category: Optional[str] = None, available_only: bool = False) -> List[CatalogItem]:
        """Get catalog items, oldest first."""
        query = self.client.table("menu_items").select(ITEM_SELECT)
        if category and category != "all":
            query = query.eq("category", category)
        if available_only:
            query = query.eq("available", True)
        result = await query.order("created_at").execute()

        return [item_from_row(row) for row in result.data]

    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        """Get a single catalog item by id."""
        result = await self.client.table("menu_items").select(ITEM_SELECT).eq("id", item_id).execute()

        if not result.data:
            logger.debug(f"Catalog item {sanitize_id_for_logging(item_id)} not found")
            return None
        return item_from_row(result.data[0])

    async def get_categories(self) -> List[Category]:
        """Get active categories in display order."""
        result = await (
            self.client.table("categories")
            .select("*")
            .eq("active", True)
            .order("sort_order")
            .execute()
        )
        return [Category(**row) for row in result.data]

    async def get_payment_methods(self) -> List[PaymentMethod]:
        """Get active payment methods in display order."""
        result = await (
            self.client.table("payment_methods")
            .select("*")
            .eq("active", True)
            .order("sort_order")
            .execute()
        )
        return [PaymentMethod(**row) for row in result.data]

    async def get_site_settings(self) -> Dict[str, str]:
        """Get site settings as a flat id -> value mapping."""
        result = await self.client.table("site_settings").select("id, value").execute()
        return {row["id"]: row["value"] for row in result.data}
