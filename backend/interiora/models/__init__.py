"""Domain models for the Interiora estimate engine."""

from interiora.models.catalog import (
    CATALOG_ADAPTER,
    AddOnItem,
    AddonPricingRow,
    CatalogItem,
    ServiceItem,
    ServicePriceRow,
    SingleLineItem,
    TierRates,
    WoodworkItem,
)
from interiora.models.enums import (
    HomeSizeClass,
    ItemKind,
    LineStatus,
    PricingIssue,
    QualityTier,
)
from interiora.models.estimate import CategoryEstimate, Estimate, EstimateLineItem
from interiora.models.home import (
    DEFAULT_CARPET_AREAS,
    Dimensions,
    HomeConfiguration,
    SelectionEntry,
)

__all__ = [
    "CATALOG_ADAPTER",
    "DEFAULT_CARPET_AREAS",
    "AddOnItem",
    "AddonPricingRow",
    "CatalogItem",
    "CategoryEstimate",
    "Dimensions",
    "Estimate",
    "EstimateLineItem",
    "HomeConfiguration",
    "HomeSizeClass",
    "ItemKind",
    "LineStatus",
    "PricingIssue",
    "QualityTier",
    "SelectionEntry",
    "ServiceItem",
    "ServicePriceRow",
    "SingleLineItem",
    "TierRates",
    "WoodworkItem",
]
