"""Factory functions for creating pre-configured EstimateEngine instances."""

from __future__ import annotations

from interiora.data.repository import CatalogRepository
from interiora.data.seed import SEED_CATALOG
from interiora.engine import EstimateEngine


def create_default_engine() -> EstimateEngine:
    """Create an EstimateEngine wired up with the built-in seed catalog.

    Example::

        from interiora import create_default_engine, HomeConfiguration

        engine = create_default_engine()
        estimate = engine.estimate(config, selections)
    """
    return EstimateEngine(CatalogRepository(SEED_CATALOG))
