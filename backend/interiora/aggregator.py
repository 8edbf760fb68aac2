"""Category aggregation: group resolved lines and compute subtotals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from interiora.models.enums import ItemKind
from interiora.models.estimate import CategoryEstimate
from interiora.numeric import round_half_up

if TYPE_CHECKING:
    from collections.abc import Iterable

    from interiora.models.catalog import CatalogItem
    from interiora.models.estimate import EstimateLineItem

UNCATALOGUED_KEY = "Uncatalogued"


def category_key(item: CatalogItem) -> str:
    """Grouping key for an item: ``"{kind} - {category}"`` or just the kind.

    The kind label stands alone when the item has no category of its own or
    when the category merely repeats the kind (CMS records without a category
    inherit the type name).
    """
    label = ItemKind(item.kind).value
    category = (item.category or "").strip()
    if not category or category == label:
        return label
    return f"{label} - {category}"


def aggregate(keyed_lines: Iterable[tuple[str, EstimateLineItem]]) -> list[CategoryEstimate]:
    """Group lines by category key, preserving first-seen key order.

    Each line price is rounded half-up to a whole unit before it is summed, so
    a printed breakdown always adds up to its printed subtotal.
    """
    grouped: dict[str, list[EstimateLineItem]] = {}
    for key, line in keyed_lines:
        rounded = line.model_copy(update={"price": round_half_up(line.price)})
        grouped.setdefault(key, []).append(rounded)

    return [
        CategoryEstimate(
            category_key=key,
            line_items=lines,
            subtotal=sum(line.price for line in lines),
        )
        for key, lines in grouped.items()
    ]
