"""Add-on selection builder used while a shopper customizes an item."""
from typing import Dict, Tuple

from storefront.catalog.models import AddOn
from storefront.errors import CartValidationError, ERROR_INVALID_ADD_ON_COUNT

from .models import SelectedAddOn


class AddOnSelection:
    """
    Running add-on counts for one customization.

    Setting or decrementing a count to 0 drops the add-on; counts never go
    negative. Selection order is kept for display.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, SelectedAddOn] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def count_of(self, add_on_id: str) -> int:
        entry = self._entries.get(add_on_id)
        return entry.count if entry else 0

    def set_count(self, add_on: AddOn, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise CartValidationError(ERROR_INVALID_ADD_ON_COUNT)
        if count == 0:
            self._entries.pop(add_on.id, None)
            return
        self._entries[add_on.id] = SelectedAddOn(add_on=add_on, count=count)

    def increment(self, add_on: AddOn) -> int:
        count = self.count_of(add_on.id) + 1
        self.set_count(add_on, count)
        return count

    def decrement(self, add_on: AddOn) -> int:
        count = max(0, self.count_of(add_on.id) - 1)
        self.set_count(add_on, count)
        return count

    def to_selected(self) -> Tuple[SelectedAddOn, ...]:
        return tuple(self._entries.values())
