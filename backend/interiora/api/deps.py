"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from interiora.data.repository import CatalogRepository
from interiora.engine import EstimateEngine
from interiora.factory import create_default_engine

logger = logging.getLogger(__name__)

CATALOG_PATH_ENV = "INTERIORA_CATALOG_PATH"


def create_engine() -> EstimateEngine:
    """Create an EstimateEngine from environment configuration.

    Reads INTERIORA_CATALOG_PATH, a JSON file of CMS item records exported
    by the catalog provider, or a typed snapshot written by
    CatalogRepository.to_json. Falls back to the built-in seed catalog when
    the variable is unset.

    Raises:
        CatalogError: If the configured catalog file cannot be loaded.
    """
    catalog_path = os.environ.get(CATALOG_PATH_ENV, "")
    if not catalog_path:
        return create_default_engine()

    repository = CatalogRepository.from_json_file(Path(catalog_path))
    logger.info("Loaded %d catalog items from %s", len(repository), catalog_path)
    return EstimateEngine(repository)
