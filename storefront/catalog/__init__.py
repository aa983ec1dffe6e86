"""Catalog package: models, Supabase repository, browsing helpers."""
from .models import AddOn, CatalogItem, Category, PaymentMethod, Variation
from .browse import (
    button_state,
    default_variation,
    filter_by_category,
    group_add_ons,
    search_items,
)

__all__ = [
    "AddOn",
    "CatalogItem",
    "Category",
    "PaymentMethod",
    "Variation",
    "button_state",
    "default_variation",
    "filter_by_category",
    "group_add_ons",
    "search_items",
]
