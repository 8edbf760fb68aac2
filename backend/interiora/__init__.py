"""Interiora home-interior estimate engine.

Usage::

    from interiora import create_default_engine, HomeConfiguration, SelectionEntry

    engine = create_default_engine()
    config = HomeConfiguration(home_size_class="3BHK", quality_tier="Premium", carpet_area=1200)
    estimate = engine.estimate(config, [SelectionEntry(item_id="electrical", selected=True)])
"""

from interiora.engine import EstimateEngine, compute_estimate
from interiora.factory import create_default_engine
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
from interiora.models.enums import (
    HomeSizeClass,
    ItemKind,
    LineStatus,
    PricingIssue,
    QualityTier,
)
from interiora.models.estimate import CategoryEstimate, Estimate, EstimateLineItem
from interiora.models.home import Dimensions, HomeConfiguration, SelectionEntry

__all__ = [
    "AddOnItem",
    "AddonPricingRow",
    "CatalogItem",
    "CategoryEstimate",
    "Dimensions",
    "Estimate",
    "EstimateEngine",
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
    "compute_estimate",
    "create_default_engine",
]
