"""
Price calculation for catalog selections and cart lines.

unit price = (effective price or base price)
             + variation delta
             + sum(add-on price * add-on count)

All arithmetic is Decimal; lines are priced from their own snapshot so
prices stay stable if the catalog changes mid-session.
"""
from decimal import Decimal
from typing import Iterable, Optional, TYPE_CHECKING

from storefront.services.money import to_decimal, round_money, add, multiply, sum_money

if TYPE_CHECKING:
    from storefront.catalog.models import CatalogItem, Variation
    from .models import CartLine, SelectedAddOn


def compose_price(
    base: Decimal,
    variation: Optional["Variation"] = None,
    add_ons: Optional[Iterable["SelectedAddOn"]] = None,
) -> Decimal:
    """Apply variation delta and add-ons on top of a base price."""
    price = to_decimal(base)
    if variation is not None:
        price = add(price, variation.price_delta)
    for selected in add_ons or ():
        price = add(price, multiply(selected.add_on.price, selected.count))
    return round_money(price)


def unit_price(
    catalog_item: "CatalogItem",
    variation: Optional["Variation"] = None,
    add_ons: Optional[Iterable["SelectedAddOn"]] = None,
) -> Decimal:
    """Unit price of a catalog item with an optional variation and add-ons."""
    return compose_price(catalog_item.price, variation, add_ons)


def line_total(line: "CartLine") -> Decimal:
    """Unit price of a cart line, computed from the line's snapshot."""
    return compose_price(line.base_price, line.selected_variation, line.selected_add_ons)


def line_subtotal(line: "CartLine") -> Decimal:
    """Unit price times quantity."""
    return round_money(multiply(line_total(line), line.quantity))


def cart_total(lines: Iterable["CartLine"]) -> Decimal:
    """Sum of line subtotals."""
    return round_money(sum_money(line_subtotal(line) for line in lines))
