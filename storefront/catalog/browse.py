"""Browsing helpers: category and search filters, add-on grouping, button state."""
from typing import Dict, Iterable, List, Optional

from .models import AddOn, CatalogItem, Variation

ALL_CATEGORIES = "all"

# Button states on the browsing surface
BUTTON_UNAVAILABLE = "unavailable"
BUTTON_ADDED = "added"
BUTTON_CUSTOMIZE = "customize"
BUTTON_ADD = "add"


def filter_by_category(items: Iterable[CatalogItem], category: Optional[str]) -> List[CatalogItem]:
    if not category or category == ALL_CATEGORIES:
        return list(items)
    return [item for item in items if item.category == category]


def search_items(items: Iterable[CatalogItem], query: Optional[str]) -> List[CatalogItem]:
    """
    Case-insensitive search on name and description.

    Results are de-duplicated by name (first occurrence wins). A blank
    query returns the items untouched.
    """
    items = list(items)
    if not query or not query.strip():
        return items

    needle = query.strip().lower()
    seen = set()
    results = []
    for item in items:
        if needle not in item.name.lower() and needle not in item.description.lower():
            continue
        name_key = item.name.lower()
        if name_key in seen:
            continue
        seen.add(name_key)
        results.append(item)
    return results


def group_add_ons(add_ons: Iterable[AddOn]) -> Dict[str, List[AddOn]]:
    """Group add-ons by category, keeping first-seen category order."""
    groups: Dict[str, List[AddOn]] = {}
    for add_on in add_ons:
        groups.setdefault(add_on.category, []).append(add_on)
    return groups


def category_label(category: str) -> str:
    """Display label for an add-on group, e.g. extra-shots -> Extra Shots."""
    words = category.replace("-", " ", 1).split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def default_variation(item: CatalogItem) -> Optional[Variation]:
    """Variation preselected when the customization flow opens."""
    return item.variations[0] if item.variations else None


def button_state(item: CatalogItem, quantity_in_cart: int) -> str:
    """What the item's button shows on the browsing surface."""
    if not item.available:
        return BUTTON_UNAVAILABLE
    if quantity_in_cart > 0:
        return BUTTON_ADDED
    if item.is_customizable:
        return BUTTON_CUSTOMIZE
    return BUTTON_ADD
