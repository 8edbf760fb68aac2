"""Estimate engine for the Interiora library.

``compute_estimate`` is the whole pipeline as one pure function:

1. **Selection snapshot**: keep entries marked selected, in selection order.
   Repeated entries for one item collapse to the latest, at the first
   entry's position.
2. **Pricing**: resolve each selected item against the catalog snapshot and
   the home configuration (see ``interiora.resolver``).
3. **Aggregation**: group lines by category key in first-seen order, with
   per-line half-up rounding (see ``interiora.aggregator``).
4. **Assembly**: sum subtotals into the grand total.

The engine holds no state between calls. Callers re-run it on every input
change and render only the latest result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from interiora.aggregator import UNCATALOGUED_KEY, aggregate, category_key
from interiora.assembler import assemble
from interiora.data.repository import CatalogRepository
from interiora.resolver import resolve, unknown_item_line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from interiora.models.catalog import CatalogItem
    from interiora.models.estimate import Estimate, EstimateLineItem
    from interiora.models.home import HomeConfiguration, SelectionEntry

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


def compute_estimate(
    config: HomeConfiguration,
    selections: Iterable[SelectionEntry],
    catalog: Iterable[CatalogItem] | CatalogRepository,
) -> Estimate:
    """Compute the categorized estimate for a home and its selections.

    Args:
        config: The active home configuration.
        selections: Selection snapshot, in the order the customer made them.
        catalog: Catalog snapshot, either as items or as a repository.

    Returns:
        The Estimate. Identical inputs always produce an equal Estimate.
    """
    repository = catalog if isinstance(catalog, CatalogRepository) else CatalogRepository(catalog)

    keyed_lines: list[tuple[str, EstimateLineItem]] = []
    for selection in _selected(selections):
        item = repository.get(selection.item_id)
        if item is None:
            logger.warning("Selected item '%s' is not in the catalog", selection.item_id)
            keyed_lines.append((UNCATALOGUED_KEY, unknown_item_line(selection.item_id)))
            continue
        keyed_lines.append((category_key(item), resolve(item, selection, config)))

    estimate = assemble(aggregate(keyed_lines))
    logger.debug(
        "Estimated %d line(s) in %d categories, total %.0f",
        len(keyed_lines),
        len(estimate.categories),
        estimate.grand_total,
    )
    return estimate


def _selected(selections: Iterable[SelectionEntry]) -> list[SelectionEntry]:
    latest: dict[str, SelectionEntry] = {}
    for selection in selections:
        # Reassigning an existing key keeps its original position.
        latest[selection.item_id] = selection
    return [selection for selection in latest.values() if selection.selected]


class EstimateEngine:
    """Estimate engine bound to a catalog snapshot.

    Args:
        repository: The catalog the selections are priced against.

    Example::

        from interiora.data.repository import CatalogRepository
        from interiora.data.seed import SEED_CATALOG

        engine = EstimateEngine(CatalogRepository(SEED_CATALOG))
        estimate = engine.estimate(config, selections)
    """

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CatalogRepository:
        return self._repository

    def estimate(
        self,
        config: HomeConfiguration,
        selections: Iterable[SelectionEntry],
    ) -> Estimate:
        """Compute the estimate for ``selections`` against this engine's catalog."""
        return compute_estimate(config, selections, self._repository)
