"""Catalog item models, one variant per pricing model.

Each variant carries exactly the fields its pricing rule reads. ``CatalogItem``
is the discriminated union over them, keyed on ``kind``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from interiora.models.enums import HomeSizeClass, ItemKind, QualityTier
from interiora.numeric import coerce_amount


def _parse_size(v: object) -> object:
    if isinstance(v, str):
        return HomeSizeClass(v)
    return v


def _parse_tier(v: object) -> object:
    if isinstance(v, str):
        return QualityTier(v)
    return v


class TierRates(BaseModel):
    """Per-square-foot rates by quality tier."""

    model_config = ConfigDict(frozen=True)

    premium: float = 0.0
    luxury: float = 0.0

    @field_validator("premium", "luxury", mode="before")
    @classmethod
    def non_negative(cls, v: object) -> float:
        return coerce_amount(v)

    def rate_for(self, tier: QualityTier) -> float:
        """Return the rate for ``tier``; Luxury falls back to Premium when unset."""
        if tier == QualityTier.LUXURY and self.luxury > 0:
            return self.luxury
        return self.premium


class AddonPricingRow(BaseModel):
    """Fixed add-on prices for one home size class."""

    model_config = ConfigDict(frozen=True)

    home_size_class: HomeSizeClass
    premium_price: float = 0.0
    luxury_price: float = 0.0

    @field_validator("home_size_class", mode="before")
    @classmethod
    def parse_size(cls, v: object) -> object:
        return _parse_size(v)

    @field_validator("premium_price", "luxury_price", mode="before")
    @classmethod
    def non_negative(cls, v: object) -> float:
        return coerce_amount(v)

    def price_for(self, tier: QualityTier) -> float:
        if tier == QualityTier.LUXURY:
            return self.luxury_price
        return self.premium_price


class ServicePriceRow(BaseModel):
    """Fixed service price for one (home size class, quality tier) pair."""

    model_config = ConfigDict(frozen=True)

    home_size_class: HomeSizeClass
    quality_tier: QualityTier
    price: float = 0.0

    @field_validator("home_size_class", mode="before")
    @classmethod
    def parse_size(cls, v: object) -> object:
        return _parse_size(v)

    @field_validator("quality_tier", mode="before")
    @classmethod
    def parse_tier(cls, v: object) -> object:
        return _parse_tier(v)

    @field_validator("price", mode="before")
    @classmethod
    def non_negative(cls, v: object) -> float:
        return coerce_amount(v)


class _CatalogItemBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str | None = None


class WoodworkItem(_CatalogItemBase):
    """Custom-built furniture priced by user-entered area."""

    kind: Literal[ItemKind.WOODWORK] = ItemKind.WOODWORK
    price_per_sqft: TierRates = Field(default_factory=TierRates)


class SingleLineItem(_CatalogItemBase):
    """Whole-home item priced against the carpet area."""

    kind: Literal[ItemKind.SINGLE_LINE_ITEM] = ItemKind.SINGLE_LINE_ITEM
    price_per_sqft: TierRates = Field(default_factory=TierRates)


class AddOnItem(_CatalogItemBase):
    """Fixed-price item offered per home size class."""

    kind: Literal[ItemKind.ADD_ON] = ItemKind.ADD_ON
    addon_pricing: list[AddonPricingRow] = Field(default_factory=list)

    def pricing_for(self, home_size_class: HomeSizeClass) -> AddonPricingRow | None:
        for row in self.addon_pricing:
            if row.home_size_class == home_size_class:
                return row
        return None


class ServiceItem(_CatalogItemBase):
    """Service priced from a fixed matrix, or base price plus area rate."""

    kind: Literal[ItemKind.SERVICE] = ItemKind.SERVICE
    description: str = ""
    base_price: float = 0.0
    price_per_sqft: TierRates = Field(default_factory=TierRates)
    pricing_matrix: list[ServicePriceRow] = Field(default_factory=list)

    @field_validator("base_price", mode="before")
    @classmethod
    def non_negative(cls, v: object) -> float:
        return coerce_amount(v)

    def matrix_price(
        self, home_size_class: HomeSizeClass, quality_tier: QualityTier
    ) -> float | None:
        for row in self.pricing_matrix:
            if row.home_size_class == home_size_class and row.quality_tier == quality_tier:
                return row.price
        return None


CatalogItem = Annotated[
    WoodworkItem | SingleLineItem | AddOnItem | ServiceItem,
    Field(discriminator="kind"),
]

CATALOG_ADAPTER: TypeAdapter[list[CatalogItem]] = TypeAdapter(list[CatalogItem])
