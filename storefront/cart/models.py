"""Cart models: selected add-ons and cart lines."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Tuple

from storefront.catalog.models import AddOn, Variation
from storefront.errors import CartValidationError, ERROR_INVALID_ADD_ON_COUNT
from storefront.services.money import to_decimal, to_float

from . import pricing


@dataclass(frozen=True)
class SelectedAddOn:
    """An add-on chosen for a selection, with how many units of it."""
    add_on: AddOn
    count: int = 1

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise CartValidationError(ERROR_INVALID_ADD_ON_COUNT)

    @property
    def id(self) -> str:
        return self.add_on.id

    @property
    def name(self) -> str:
        return self.add_on.name

    @property
    def label(self) -> str:
        """Display label: "Name" for a single unit, "Name x3" otherwise."""
        if self.count > 1:
            return f"{self.add_on.name} x{self.count}"
        return self.add_on.name

    def to_dict(self) -> dict:
        return {
            "id": self.add_on.id,
            "name": self.add_on.name,
            "price": str(self.add_on.price),
            "category": self.add_on.category,
            "count": self.count,
        }


@dataclass
class CartLine:
    """Single configured selection in the cart."""
    id: str
    catalog_item_id: str
    name: str
    quantity: int
    base_price: Decimal  # Effective price of the catalog item when added
    selected_variation: Optional[Variation] = None
    selected_add_ons: Tuple[SelectedAddOn, ...] = ()
    added_at: str = field(default="", compare=False)

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()
        self.base_price = to_decimal(self.base_price)
        self.selected_add_ons = tuple(self.selected_add_ons)

    @property
    def is_default(self) -> bool:
        """True when the line has no variation and no add-ons."""
        return self.selected_variation is None and not self.selected_add_ons

    @property
    def unit_price(self) -> Decimal:
        """Price of a single unit."""
        return pricing.line_total(self)

    @property
    def total_price(self) -> Decimal:
        """Price for all units."""
        return pricing.line_subtotal(self)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        variation = self.selected_variation
        return {
            "id": self.id,
            "catalog_item_id": self.catalog_item_id,
            "name": self.name,
            "quantity": self.quantity,
            "variation": (
                {"id": variation.id, "name": variation.name, "price_delta": str(variation.price_delta)}
                if variation else None
            ),
            "add_ons": [selected.to_dict() for selected in self.selected_add_ons],
            "unit_price": to_float(self.unit_price),
            "total_price": to_float(self.total_price),
            "added_at": self.added_at,
        }
