"""Catalog data layer for the Interiora estimate engine."""

from interiora.data.cms import catalog_from_cms_records
from interiora.data.repository import CatalogRepository

__all__ = [
    "CatalogRepository",
    "catalog_from_cms_records",
]
