"""Per-item quantities reflected back onto the browsing surface.

Only plain lines (no variation, no add-ons) count: those are the only
configuration the browsing surface can increment or decrement directly.
Customized lines show up in the cart and checkout views only.
"""
from collections import defaultdict
from typing import Dict, Iterable

from .models import CartLine


def quantity_in_cart_for_default(catalog_item_id: str, lines: Iterable[CartLine]) -> int:
    """Units of the plain configuration of an item already in the cart."""
    return sum(
        line.quantity
        for line in lines
        if line.catalog_item_id == catalog_item_id and line.is_default
    )


def default_quantities(lines: Iterable[CartLine]) -> Dict[str, int]:
    """Plain-configuration quantities for every item in the cart, keyed by item id."""
    quantities: Dict[str, int] = defaultdict(int)
    for line in lines:
        if line.is_default:
            quantities[line.catalog_item_id] += line.quantity
    return dict(quantities)
