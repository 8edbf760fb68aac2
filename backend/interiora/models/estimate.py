"""Estimate output models for the Interiora engine."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from interiora.models.enums import LineStatus, PricingIssue

# Subtotals are sums of whole-unit prices, so this only absorbs float noise
# from hand-built estimates.
_TOTAL_TOLERANCE = 1e-6


class EstimateLineItem(BaseModel):
    """One priced selection.

    ``status`` tells the caller whether the price is usable; ``issue`` says
    why it is not (e.g. dimensions still missing).
    """

    model_config = ConfigDict(frozen=True)

    item_id: str
    name: str
    price: float = Field(ge=0)
    status: LineStatus
    issue: PricingIssue | None = None

    @property
    def is_visible(self) -> bool:
        """Excluded lines are counted as 0 but left out of the printed breakdown."""
        return self.status != LineStatus.EXCLUDED


class CategoryEstimate(BaseModel):
    """Line items sharing a category key, with their subtotal."""

    model_config = ConfigDict(frozen=True)

    category_key: str
    line_items: list[EstimateLineItem]
    subtotal: float

    @model_validator(mode="after")
    def subtotal_matches_lines(self) -> CategoryEstimate:
        line_sum = sum(line.price for line in self.line_items)
        if not math.isclose(self.subtotal, line_sum, abs_tol=_TOTAL_TOLERANCE):
            msg = (
                f"Subtotal of '{self.category_key}' must equal the sum of its "
                f"line items, got {self.subtotal} != {line_sum}"
            )
            raise ValueError(msg)
        return self

    @property
    def visible_line_items(self) -> list[EstimateLineItem]:
        return [line for line in self.line_items if line.is_visible]


class Estimate(BaseModel):
    """Complete categorized estimate.

    This is the only value handed to renderers (PDF export, on-screen
    summary); they should not need to re-derive any pricing.
    """

    model_config = ConfigDict(frozen=True)

    categories: list[CategoryEstimate] = Field(default_factory=list)
    grand_total: float = 0.0

    @model_validator(mode="after")
    def grand_total_matches_categories(self) -> Estimate:
        category_sum = sum(category.subtotal for category in self.categories)
        if not math.isclose(self.grand_total, category_sum, abs_tol=_TOTAL_TOLERANCE):
            msg = (
                f"grand_total must equal the sum of category subtotals, "
                f"got {self.grand_total} != {category_sum}"
            )
            raise ValueError(msg)
        return self

    @property
    def line_items(self) -> list[EstimateLineItem]:
        return [line for category in self.categories for line in category.line_items]

    def to_export_dict(self) -> dict[str, Any]:
        """Produce the printable breakdown for PDF/email export.

        Excluded lines are hidden, and so is any category left without
        visible lines. Excluded lines are priced at 0, so the printed
        subtotals and grand total still add up.
        """
        categories: list[dict[str, Any]] = []
        for category in self.categories:
            visible = category.visible_line_items
            if not visible:
                continue
            categories.append(
                {
                    "category": category.category_key,
                    "items": [{"name": line.name, "price": line.price} for line in visible],
                    "subtotal": category.subtotal,
                }
            )
        return {"categories": categories, "grand_total": self.grand_total}

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce the counters the on-screen summary shows.

        Incomplete and excluded item names let the caller prompt for
        missing dimensions or explain unavailable add-ons.
        """
        lines = self.line_items
        return {
            "num_categories": len(self.categories),
            "num_line_items": len(lines),
            "grand_total": self.grand_total,
            "incomplete_items": [
                line.name for line in lines if line.status == LineStatus.INCOMPLETE
            ],
            "excluded_items": [
                line.name for line in lines if line.status == LineStatus.EXCLUDED
            ],
        }
