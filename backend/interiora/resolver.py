"""Pricing resolver: one selected catalog item to one estimate line.

Each item kind has exactly one pricing rule:

1. **Add Ons**: fixed price from the row matching the home size class,
   Luxury or Premium column by tier. No row means the add-on is not offered
   for this home and the line is *excluded* at 0.
2. **Single Line Items**: rate x carpet area, where the rate is the user's
   override or the catalog rate for the tier.
3. **Woodwork**: rate x length x width x quantity. Without usable
   dimensions the line is *incomplete* at 0.
4. **Services**: the fixed matrix price for (size class, tier) if present,
   else base price + tier rate x carpet area.

Resolution never raises. Missing data resolves to a zero price paired with a
status and a ``PricingIssue`` so callers can tell "free" from "unknown".
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from interiora.models.catalog import AddOnItem, ServiceItem, SingleLineItem, WoodworkItem
from interiora.models.enums import LineStatus, PricingIssue
from interiora.models.estimate import EstimateLineItem

if TYPE_CHECKING:
    from interiora.models.catalog import CatalogItem, TierRates
    from interiora.models.home import HomeConfiguration, SelectionEntry

logger = logging.getLogger(__name__)


def resolve(
    item: CatalogItem,
    selection: SelectionEntry,
    config: HomeConfiguration,
) -> EstimateLineItem:
    """Price a selected item for the given home configuration.

    Args:
        item: The catalog entry the selection refers to.
        selection: The customer's selection; only called for selected entries.
        config: The active home configuration.

    Returns:
        An EstimateLineItem with a non-negative price and a status.
    """
    if isinstance(item, AddOnItem):
        line = _resolve_add_on(item, config)
    elif isinstance(item, SingleLineItem):
        line = _resolve_single_line(item, selection, config)
    elif isinstance(item, WoodworkItem):
        line = _resolve_woodwork(item, selection, config)
    else:
        line = _resolve_service(item, config)

    if line.issue is not None:
        logger.debug("Item '%s' resolved %s: %s", item.id, line.status, line.issue)
    return line


def unknown_item_line(item_id: str) -> EstimateLineItem:
    """Line for a selection whose item is missing from the catalog snapshot."""
    return EstimateLineItem(
        item_id=item_id,
        name=item_id,
        price=0.0,
        status=LineStatus.INCOMPLETE,
        issue=PricingIssue.MISSING_PRICE_DATA,
    )


def _effective_rate(
    rates: TierRates, selection: SelectionEntry, config: HomeConfiguration
) -> float:
    """User override when set, otherwise the catalog rate for the tier."""
    if selection.user_price > 0:
        return selection.user_price
    return rates.rate_for(config.quality_tier)


def _line(
    item: CatalogItem,
    price: float,
    status: LineStatus = LineStatus.COMPLETE,
    issue: PricingIssue | None = None,
) -> EstimateLineItem:
    if not math.isfinite(price):
        # Overflowed product of user-entered figures
        price, status, issue = 0.0, LineStatus.INCOMPLETE, PricingIssue.MISSING_PRICE_DATA
    return EstimateLineItem(
        item_id=item.id,
        name=item.name,
        price=max(price, 0.0),
        status=status,
        issue=issue,
    )


def _resolve_add_on(item: AddOnItem, config: HomeConfiguration) -> EstimateLineItem:
    row = item.pricing_for(config.home_size_class)
    if row is None:
        return _line(item, 0.0, LineStatus.EXCLUDED, PricingIssue.CONFIGURATION_MISMATCH)
    return _line(item, row.price_for(config.quality_tier))


def _resolve_single_line(
    item: SingleLineItem, selection: SelectionEntry, config: HomeConfiguration
) -> EstimateLineItem:
    rate = _effective_rate(item.price_per_sqft, selection, config)
    if rate <= 0:
        return _line(item, 0.0, LineStatus.INCOMPLETE, PricingIssue.MISSING_PRICE_DATA)
    return _line(item, rate * config.carpet_area)


def _resolve_woodwork(
    item: WoodworkItem, selection: SelectionEntry, config: HomeConfiguration
) -> EstimateLineItem:
    dimensions = selection.user_dimensions
    if dimensions is None or not dimensions.is_usable:
        return _line(item, 0.0, LineStatus.INCOMPLETE, PricingIssue.INVALID_DIMENSIONS)

    rate = _effective_rate(item.price_per_sqft, selection, config)
    if rate <= 0:
        return _line(item, 0.0, LineStatus.INCOMPLETE, PricingIssue.MISSING_PRICE_DATA)
    return _line(item, rate * dimensions.area * selection.quantity)


def _resolve_service(item: ServiceItem, config: HomeConfiguration) -> EstimateLineItem:
    fixed = item.matrix_price(config.home_size_class, config.quality_tier)
    if fixed is not None:
        return _line(item, fixed)
    area_rate = item.price_per_sqft.rate_for(config.quality_tier)
    return _line(item, item.base_price + area_rate * config.carpet_area)
