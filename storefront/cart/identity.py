"""
Cart line identity.

A line id is derived from the selection itself:

    <catalog item id>|<variation id or "-">|<addon id>:<count>,<addon id>:<count>

Add-ons are folded by id and sorted, so the same selection always maps to
the same key no matter the order it was built in. Keys never carry time or
random parts; identical selections merge.

Ids are percent-encoded (including "-") before joining, so no id can
contain a separator or spell the "no variation" sentinel.
"""
from collections import OrderedDict
from typing import Iterable, Optional, Tuple, Union
from urllib.parse import quote

from storefront.catalog.models import AddOn, Variation

from .models import SelectedAddOn

KEY_SEPARATOR = "|"
ADD_ON_SEPARATOR = ","
COUNT_SEPARATOR = ":"
NO_VARIATION = "-"
SEPARATE_PREFIX = "#"

AddOnInput = Union[SelectedAddOn, AddOn]


def escape_id(value: str) -> str:
    """Percent-encode an id so it is safe to embed in a line key."""
    return quote(str(value), safe="").replace("-", "%2D")


def normalize_add_ons(add_ons: Optional[Iterable[AddOnInput]]) -> Tuple[SelectedAddOn, ...]:
    """
    Fold an add-on selection into one entry per add-on id, sorted by id.

    Accepts SelectedAddOn values, or bare AddOn values which count as one
    unit each (a list with the same add-on repeated three times becomes
    a single entry with count 3).
    """
    if not add_ons:
        return ()

    folded: "OrderedDict[str, SelectedAddOn]" = OrderedDict()
    for entry in add_ons:
        selected = entry if isinstance(entry, SelectedAddOn) else SelectedAddOn(add_on=entry)
        existing = folded.get(selected.id)
        if existing is None:
            folded[selected.id] = selected
        else:
            folded[selected.id] = SelectedAddOn(
                add_on=existing.add_on,
                count=existing.count + selected.count,
            )

    return tuple(folded[add_on_id] for add_on_id in sorted(folded))


def add_on_component(add_ons: Iterable[SelectedAddOn]) -> str:
    return ADD_ON_SEPARATOR.join(
        f"{escape_id(selected.id)}{COUNT_SEPARATOR}{selected.count}"
        for selected in normalize_add_ons(add_ons)
    )


def resolve_key(
    catalog_item_id: str,
    variation: Optional[Variation] = None,
    add_ons: Optional[Iterable[AddOnInput]] = None,
    separate_marker: Optional[str] = None,
) -> str:
    """
    Compute the line id for a selection.

    Args:
        catalog_item_id: Catalog item id
        variation: Selected variation, if any
        add_ons: Selected add-ons in any order
        separate_marker: Explicit marker for a selection the shopper wants
            kept apart from otherwise identical lines

    Returns:
        Deterministic composite key
    """
    parts = [
        escape_id(catalog_item_id),
        escape_id(variation.id) if variation is not None else NO_VARIATION,
        add_on_component(add_ons or ()),
    ]
    if separate_marker:
        parts.append(f"{SEPARATE_PREFIX}{escape_id(separate_marker)}")
    return KEY_SEPARATOR.join(parts)

