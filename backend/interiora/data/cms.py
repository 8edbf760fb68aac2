"""Conversion of catalog CMS item records into typed catalog items.

The CMS stores every item in one loosely typed shape. The pricing model is
inferred the same way the storefront did it:

- the type name comes from ``category.type.name``, else ``type.name``;
- the category falls back to the type name when the item has none;
- records carrying ``addonPricing`` rows are add-ons whatever their type.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from interiora.exceptions import CatalogError
from interiora.models.catalog import (
    AddOnItem,
    AddonPricingRow,
    CatalogItem,
    ServiceItem,
    ServicePriceRow,
    SingleLineItem,
    TierRates,
    WoodworkItem,
)
from interiora.models.enums import ItemKind

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_Row = TypeVar("_Row", AddonPricingRow, ServicePriceRow)

_FALLBACK_TYPE_NAME = "Miscellaneous"

# Normalised CMS type name -> pricing model
_KIND_BY_TYPE_NAME: dict[str, ItemKind] = {
    "woodwork": ItemKind.WOODWORK,
    "singleline": ItemKind.SINGLE_LINE_ITEM,
    "singlelineitem": ItemKind.SINGLE_LINE_ITEM,
    "singlelineitems": ItemKind.SINGLE_LINE_ITEM,
    "addon": ItemKind.ADD_ON,
    "addons": ItemKind.ADD_ON,
    "service": ItemKind.SERVICE,
    "services": ItemKind.SERVICE,
}


def catalog_from_cms_records(records: Any) -> list[CatalogItem]:
    """Convert CMS item records to catalog items.

    Records without an id or name are skipped with a warning. Pricing rows
    that cannot be read are dropped from their record, which is kept.

    Raises:
        CatalogError: If ``records`` is not a list.
    """
    if not isinstance(records, list):
        msg = f"Catalog payload must be a list of items, got {type(records).__name__}"
        raise CatalogError(msg)

    items: list[CatalogItem] = []
    for index, record in enumerate(records):
        item = cms_record_to_item(record)
        if item is None:
            logger.warning("Skipping CMS record %d: missing id/name or invalid fields", index)
            continue
        items.append(item)
    return items


def cms_record_to_item(record: Any) -> CatalogItem | None:
    """Convert one CMS record. Returns None if it cannot be priced."""
    if not isinstance(record, dict):
        return None

    item_id = record.get("id") or record.get("_id")
    name = record.get("name")
    if not item_id or not name:
        return None

    type_name = _type_name(record)
    category = _nested_name(record.get("category")) or type_name
    kind = _kind_for(type_name, record)
    rates = TierRates(
        premium=record.get("premiumPricePerSqFt"),
        luxury=record.get("luxuryPricePerSqFt"),
    )

    try:
        if kind == ItemKind.ADD_ON:
            return AddOnItem(
                id=str(item_id),
                name=name,
                category=category,
                addon_pricing=_pricing_rows(item_id, record.get("addonPricing"), _addon_row),
            )
        if kind == ItemKind.SERVICE:
            return ServiceItem(
                id=str(item_id),
                name=name,
                category=category,
                description=record.get("description") or "",
                base_price=record.get("basePrice"),
                price_per_sqft=rates,
                pricing_matrix=_pricing_rows(item_id, record.get("pricingMatrix"), _matrix_row),
            )
        if kind == ItemKind.SINGLE_LINE_ITEM:
            return SingleLineItem(
                id=str(item_id), name=name, category=category, price_per_sqft=rates
            )
        return WoodworkItem(id=str(item_id), name=name, category=category, price_per_sqft=rates)
    except ValidationError as exc:
        logger.warning("Invalid CMS record '%s': %s", item_id, exc)
        return None


def _pricing_rows(
    item_id: Any, rows: Any, parse: Callable[[dict[str, Any]], _Row]
) -> list[_Row]:
    """Parse pricing rows one by one, skipping those that cannot be read."""
    parsed: list[_Row] = []
    for index, row in enumerate(rows if isinstance(rows, list) else []):
        try:
            parsed.append(parse(row))
        except (ValidationError, ValueError, AttributeError) as exc:
            logger.warning("Skipping pricing row %d of CMS record '%s': %s", index, item_id, exc)
    return parsed


def _addon_row(row: dict[str, Any]) -> AddonPricingRow:
    return AddonPricingRow(
        home_size_class=row.get("roomType") or row.get("homeSizeClass"),
        premium_price=row.get("premiumPrice"),
        luxury_price=row.get("luxuryPrice"),
    )


def _matrix_row(row: dict[str, Any]) -> ServicePriceRow:
    return ServicePriceRow(
        home_size_class=row.get("roomType") or row.get("homeSizeClass"),
        quality_tier=row.get("qualityTier"),
        price=row.get("price"),
    )


def _nested_name(value: Any) -> str | None:
    if isinstance(value, dict):
        name = value.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
    return None


def _type_name(record: dict[str, Any]) -> str:
    category = record.get("category")
    if isinstance(category, dict):
        name = _nested_name(category.get("type"))
        if name:
            return name
    return _nested_name(record.get("type")) or _FALLBACK_TYPE_NAME


def _kind_for(type_name: str, record: dict[str, Any]) -> ItemKind:
    if record.get("addonPricing"):
        return ItemKind.ADD_ON
    normalised = re.sub(r"[^a-z]", "", type_name.lower())
    kind = _KIND_BY_TYPE_NAME.get(normalised)
    if kind is None:
        logger.debug("Unknown CMS type '%s'; pricing as woodwork", type_name)
        return ItemKind.WOODWORK
    return kind
