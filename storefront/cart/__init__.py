"""Cart package: line identity, pricing, session store and quantity badges."""
from .models import CartLine, SelectedAddOn
from .identity import resolve_key, normalize_add_ons
from .pricing import unit_price, line_total, cart_total
from .store import CartStore
from .aggregator import quantity_in_cart_for_default, default_quantities
from .selection import AddOnSelection

__all__ = [
    "CartLine",
    "SelectedAddOn",
    "resolve_key",
    "normalize_add_ons",
    "unit_price",
    "line_total",
    "cart_total",
    "CartStore",
    "quantity_in_cart_for_default",
    "default_quantities",
    "AddOnSelection",
]
