"""Custom exception hierarchy for the Interiora estimate engine.

Pricing problems never surface as exceptions; they are reported per line via
``PricingIssue``. These errors cover the edges around the engine: catalog
ingestion and home configuration defaults.
"""

from __future__ import annotations


class EstimatorError(Exception):
    """Base exception for all Interiora errors."""


class CatalogError(EstimatorError):
    """Raised when a catalog payload cannot be read or has the wrong shape."""


class ConfigurationError(EstimatorError):
    """Raised when a home configuration cannot be completed from defaults."""
