"""Estimate assembly: the terminal step of the pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from interiora.models.estimate import Estimate

if TYPE_CHECKING:
    from interiora.models.estimate import CategoryEstimate


def assemble(categories: list[CategoryEstimate]) -> Estimate:
    """Combine category subtotals into the final estimate.

    Subtotals are already rounded, so the grand total is a plain sum.
    """
    return Estimate(
        categories=list(categories),
        grand_total=sum(category.subtotal for category in categories),
    )
