"""Home configuration and selection models for the Interiora engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from interiora.exceptions import ConfigurationError
from interiora.models.enums import HomeSizeClass, QualityTier
from interiora.numeric import coerce_amount, coerce_quantity

# Carpet area (sq ft) the wizard pre-fills when a home size is picked.
DEFAULT_CARPET_AREAS: dict[HomeSizeClass, float] = {
    HomeSizeClass.TWO_BHK: 2500.0,
    HomeSizeClass.THREE_BHK: 2300.0,
}


class HomeConfiguration(BaseModel):
    """The customer's home: size class, quality tier and carpet area."""

    model_config = ConfigDict(frozen=True)

    home_size_class: HomeSizeClass
    quality_tier: QualityTier
    carpet_area: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("home_size_class", mode="before")
    @classmethod
    def parse_home_size_class(cls, v: object) -> object:
        if isinstance(v, str):
            return HomeSizeClass(v)
        return v

    @field_validator("quality_tier", mode="before")
    @classmethod
    def parse_quality_tier(cls, v: object) -> object:
        if isinstance(v, str):
            return QualityTier(v)
        return v

    @classmethod
    def with_default_area(
        cls,
        home_size_class: HomeSizeClass | str,
        quality_tier: QualityTier | str,
    ) -> HomeConfiguration:
        """Build a configuration using the default carpet area for the size class.

        Raises:
            ConfigurationError: If no default area is known for the size class.
        """
        size = HomeSizeClass(home_size_class)
        area = DEFAULT_CARPET_AREAS.get(size)
        if area is None:
            msg = f"No default carpet area for '{size}'; carpet_area must be given"
            raise ConfigurationError(msg)
        return cls(
            home_size_class=size,
            quality_tier=QualityTier(quality_tier),
            carpet_area=area,
        )


class Dimensions(BaseModel):
    """User-entered length and width (ft) of a woodwork item."""

    model_config = ConfigDict(frozen=True)

    length: float = 0.0
    width: float = 0.0

    @field_validator("length", "width", mode="before")
    @classmethod
    def non_negative(cls, v: object) -> float:
        return coerce_amount(v)

    @property
    def is_usable(self) -> bool:
        return self.length > 0 and self.width > 0

    @property
    def area(self) -> float:
        return self.length * self.width


class SelectionEntry(BaseModel):
    """The customer's choice and overrides for a single catalog item.

    ``user_price`` of 0 means "not overridden"; the catalog rate applies.
    """

    model_config = ConfigDict(frozen=True)

    item_id: str
    selected: bool = False
    user_price: float = 0.0
    user_dimensions: Dimensions | None = None
    quantity: int = 1

    @field_validator("user_price", mode="before")
    @classmethod
    def non_negative_price(cls, v: object) -> float:
        return coerce_amount(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def at_least_one(cls, v: object) -> int:
        return coerce_quantity(v)
