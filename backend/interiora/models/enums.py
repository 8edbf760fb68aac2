"""Enums for the Interiora domain models."""

from __future__ import annotations

import re
from enum import StrEnum

_BHK_PATTERN = re.compile(r"^\s*(?:bhk[_\s-]*(\d)|(\d)\s*bhk)\s*$", re.IGNORECASE)


class HomeSizeClass(StrEnum):
    """Bedroom-hall-kitchen configuration of the home."""

    ONE_BHK = "1BHK"
    TWO_BHK = "2BHK"
    THREE_BHK = "3BHK"
    FOUR_BHK = "4BHK"

    @classmethod
    def _missing_(cls, value: object) -> HomeSizeClass | None:
        # Accepts "2 BHK", "2bhk" and the CMS form "BHK_2".
        if not isinstance(value, str):
            return None
        match = _BHK_PATTERN.match(value)
        if match is None:
            return None
        bedrooms = match.group(1) or match.group(2)
        for member in cls:
            if member.value == f"{bedrooms}BHK":
                return member
        return None


class QualityTier(StrEnum):
    """Material grade selecting which rate column applies."""

    PREMIUM = "Premium"
    LUXURY = "Luxury"

    @classmethod
    def _missing_(cls, value: object) -> QualityTier | None:
        if not isinstance(value, str):
            return None
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


class ItemKind(StrEnum):
    """Pricing model of a catalog item.

    Values are the type names used by the catalog CMS, which also serve as
    the category label for items that carry no category of their own.
    """

    WOODWORK = "Woodwork"
    SINGLE_LINE_ITEM = "Single Line Items"
    ADD_ON = "Add Ons"
    SERVICE = "Services"


class LineStatus(StrEnum):
    """Completeness of a resolved estimate line."""

    COMPLETE = "Complete"
    INCOMPLETE = "Incomplete"
    EXCLUDED = "Excluded"


class PricingIssue(StrEnum):
    """Why a line resolved to less than a complete price."""

    MISSING_PRICE_DATA = "MissingPriceData"
    INVALID_DIMENSIONS = "InvalidDimensions"
    CONFIGURATION_MISMATCH = "ConfigurationMismatch"
