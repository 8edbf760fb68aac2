"""Seed catalog for the Interiora estimate engine.

Woodwork and service rates are the storefront's default catalog (INR per
sq ft, Premium tier). Add-on and single-line entries are sample data so that
every pricing model is represented.
"""

from __future__ import annotations

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
from interiora.models.enums import HomeSizeClass, QualityTier


def _woodwork(item_id: str, name: str, category: str, premium: float) -> WoodworkItem:
    return WoodworkItem(
        id=item_id,
        name=name,
        category=category,
        price_per_sqft=TierRates(premium=premium),
    )


SEED_CATALOG: list[CatalogItem] = [
    # --- Foyer & Outside Area ---
    _woodwork("shoe-rack", "Shoe Rack", "Foyer & Outside Area", 1200.0),
    _woodwork("safety-door", "Safety Door", "Foyer & Outside Area", 800.0),
    _woodwork("name-plate", "Name Plate Area Panelling", "Foyer & Outside Area", 900.0),
    # --- Living Room ---
    _woodwork("tv-unit", "Grand TV Unit", "Living Room", 1500.0),
    _woodwork("crockery-unit", "Crockery Unit", "Living Room", 1400.0),
    _woodwork("bar-unit", "Bar Unit", "Living Room", 1600.0),
    _woodwork("book-shelf", "Book Shelf", "Living Room", 1100.0),
    _woodwork("wall-paper-living", "Wall Paper", "Living Room", 200.0),
    _woodwork("temple-design", "Temple Design", "Living Room", 2000.0),
    _woodwork("sofa-back-wall", "Sofa Back Wall Panelling", "Living Room", 800.0),
    _woodwork("dining-wall", "Dining Wall Panelling", "Living Room", 800.0),
    _woodwork("diamond-mirror", "Diamond Mirror Wall", "Living Room", 1200.0),
    # --- Bedroom 01 ---
    _woodwork("wardrobe", "Wardrobe", "Bedroom 01", 1800.0),
    _woodwork("loft", "Loft", "Bedroom 01", 1200.0),
    _woodwork("dressing", "Dressing", "Bedroom 01", 1500.0),
    _woodwork("bed", "Bed", "Bedroom 01", 1000.0),
    _woodwork("bed-back-rest", "Bed Back Rest with Fabric", "Bedroom 01", 1500.0),
    _woodwork("side-table", "Side Table", "Bedroom 01", 1200.0),
    _woodwork("working-table", "Working Table", "Bedroom 01", 1300.0),
    _woodwork("mini-tv-unit", "Mini TV Unit", "Bedroom 01", 1100.0),
    _woodwork("wall-paper-bedroom", "Wall Paper", "Bedroom 01", 200.0),
    _woodwork(
        "bed-back-wall-laminate", "Bed Back Wall Laminate Panelling", "Bedroom 01", 900.0
    ),
    # --- Single line items ---
    SingleLineItem(
        id="full-home-flooring",
        name="Full Home Flooring",
        price_per_sqft=TierRates(premium=250.0, luxury=400.0),
    ),
    SingleLineItem(
        id="deep-cleaning",
        name="Post-Work Deep Cleaning",
        price_per_sqft=TierRates(premium=15.0, luxury=20.0),
    ),
    # --- Add ons ---
    AddOnItem(
        id="smart-lock",
        name="Smart Door Lock",
        addon_pricing=[
            AddonPricingRow(
                home_size_class=HomeSizeClass.TWO_BHK, premium_price=5000.0, luxury_price=8000.0
            ),
            AddonPricingRow(
                home_size_class=HomeSizeClass.THREE_BHK, premium_price=5000.0, luxury_price=8000.0
            ),
        ],
    ),
    AddOnItem(
        id="home-theatre",
        name="Home Theatre Setup",
        addon_pricing=[
            AddonPricingRow(
                home_size_class=HomeSizeClass.THREE_BHK,
                premium_price=120000.0,
                luxury_price=185000.0,
            ),
        ],
    ),
    # --- Services ---
    ServiceItem(
        id="electrical",
        name="Electrical",
        description="Complete electrical work with Polycab wires",
        price_per_sqft=TierRates(premium=80.0),
    ),
    ServiceItem(
        id="false-ceiling",
        name="False Ceiling",
        description="Gypsum false ceiling with LED lights",
        price_per_sqft=TierRates(premium=150.0),
    ),
    ServiceItem(
        id="sofa-dining",
        name="Sofa 5 Seater with Dining 4 Seater",
        description="Premium sofa set with dining table",
        base_price=85000.0,
    ),
    ServiceItem(
        id="full-house-painting",
        name="Full House Painting",
        description="Asian Royal Paint - Royal Shine",
        price_per_sqft=TierRates(premium=45.0),
        pricing_matrix=[
            ServicePriceRow(
                home_size_class=HomeSizeClass.TWO_BHK,
                quality_tier=QualityTier.LUXURY,
                price=140000.0,
            ),
            ServicePriceRow(
                home_size_class=HomeSizeClass.THREE_BHK,
                quality_tier=QualityTier.LUXURY,
                price=130000.0,
            ),
        ],
    ),
]
