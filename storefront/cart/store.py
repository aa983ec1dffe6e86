"""Session cart store."""
from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from storefront.catalog.models import CatalogItem, Variation
from storefront.errors import (
    CartValidationError,
    ERROR_INVALID_QUANTITY,
    ERROR_ITEM_UNAVAILABLE,
    ERROR_UNKNOWN_ADD_ON,
    ERROR_UNKNOWN_VARIATION,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.money import to_float

from . import pricing
from .identity import AddOnInput, normalize_add_ons, resolve_key
from .models import CartLine, SelectedAddOn

logger = get_logger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


class CartStore:
    """
    Ordered collection of cart lines for one shopping session.

    - Identical selections (same item, variation and add-on counts) share one line
    - Quantities are always positive; a line dropped to 0 is removed
    - Prices are derived from each line's snapshot on read
    """

    def __init__(self) -> None:
        # dict keeps insertion order
        self._lines: Dict[str, CartLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, line_id: str) -> bool:
        return line_id in self._lines

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def add_item(
        self,
        catalog_item: CatalogItem,
        quantity: int = 1,
        variation: Optional[Variation] = None,
        add_ons: Optional[Iterable[AddOnInput]] = None,
        separate_marker: Optional[str] = None,
    ) -> CartLine:
        """
        Add a selection to the cart, merging with an identical line.

        Raises:
            CartValidationError: item unavailable, quantity below 1, or a
                variation/add-on that does not belong to the item
        """
        if not catalog_item.available:
            raise CartValidationError(ERROR_ITEM_UNAVAILABLE)
        if not _is_positive_int(quantity):
            raise CartValidationError(ERROR_INVALID_QUANTITY)
        # Lines hold the catalog's records; caller objects only supply ids
        if variation is not None:
            variation = catalog_item.find_variation(variation.id)
            if variation is None:
                raise CartValidationError(ERROR_UNKNOWN_VARIATION)

        selected_add_ons = []
        for selected in normalize_add_ons(add_ons):
            add_on = catalog_item.find_add_on(selected.id)
            if add_on is None:
                raise CartValidationError(ERROR_UNKNOWN_ADD_ON)
            selected_add_ons.append(SelectedAddOn(add_on=add_on, count=selected.count))
        selected_add_ons = tuple(selected_add_ons)

        line_id = resolve_key(catalog_item.id, variation, selected_add_ons, separate_marker)

        existing = self._lines.get(line_id)
        if existing is not None:
            existing.quantity += quantity
            logger.debug(
                f"Merged into line {sanitize_id_for_logging(line_id)}: quantity={existing.quantity}"
            )
            return existing

        line = CartLine(
            id=line_id,
            catalog_item_id=catalog_item.id,
            name=catalog_item.name,
            quantity=quantity,
            base_price=catalog_item.price,
            selected_variation=variation,
            selected_add_ons=selected_add_ons,
        )
        self._lines[line_id] = line
        logger.info(f"Added line {sanitize_id_for_logging(line_id)}: quantity={quantity}")
        return line

    def update_quantity(self, line_id: str, quantity: int) -> Optional[CartLine]:
        """
        Set a line's quantity exactly (0 or less removes the line).

        Unknown line ids are ignored. Returns the updated line, or None when
        the line was removed or did not exist.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise CartValidationError(ERROR_INVALID_QUANTITY)

        line = self._lines.get(line_id)
        if line is None:
            logger.debug(f"update_quantity: no line {sanitize_id_for_logging(line_id)}")
            return None

        if quantity <= 0:
            self.remove_item(line_id)
            return None

        line.quantity = quantity
        return line

    def remove_item(self, line_id: str) -> bool:
        """Remove a line. Returns False if there was nothing to remove."""
        line = self._lines.pop(line_id, None)
        if line is None:
            logger.debug(f"remove_item: no line {sanitize_id_for_logging(line_id)}")
            return False
        logger.info(f"Removed line {sanitize_id_for_logging(line_id)}")
        return True

    def clear(self) -> None:
        """Remove every line."""
        self._lines.clear()

    def get_line(self, line_id: str) -> Optional[CartLine]:
        return self._lines.get(line_id)

    def get_lines(self) -> Tuple[CartLine, ...]:
        """Current lines in insertion order."""
        return tuple(self._lines.values())

    def get_total_items(self) -> int:
        """Total number of units across lines."""
        return sum(line.quantity for line in self._lines.values())

    def get_total_price(self) -> Decimal:
        """Sum of unit price times quantity over all lines."""
        return pricing.cart_total(self._lines.values())

    def summary(self) -> dict:
        """Cart summary for API responses."""
        if self.is_empty:
            return {
                "is_empty": True,
                "total_items": 0,
                "items": [],
                "total": 0.0,
            }

        return {
            "is_empty": False,
            "total_items": self.get_total_items(),
            "items": [line.to_dict() for line in self._lines.values()],
            "total": to_float(self.get_total_price()),
        }
