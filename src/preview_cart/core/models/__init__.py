"""
Core Models Package

Immutable, validated data models for the storefront catalog and the
cart totals derived from it.

All models are frozen dataclasses. Prices are ``Decimal``. Anything
that can be calculated (category counts, pack prices, cart totals) is
calculated on demand rather than stored.
"""

from .assets import ALL_CATEGORY_ID, Asset, Category
from .catalog import ALL_CATEGORY, Catalog, Pricing
from .snapshot import CartSnapshot

__all__ = [
    "ALL_CATEGORY",
    "ALL_CATEGORY_ID",
    "Asset",
    "Category",
    "Catalog",
    "Pricing",
    "CartSnapshot",
]
