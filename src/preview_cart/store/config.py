"""
Module: store.config

Purpose:
    Configuration dataclass for the storefront engine. Immutable
    configuration with validation on construction.

Key Classes:
    - StoreConfig: Pagination, cart preview and catalog loading options

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - store.controller: Storefront construction
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class StoreConfig:
    """
    Configuration for a storefront session (immutable).

    Pricing constants are not configured here; they travel with the
    catalog file.

    Attributes:
        page_size: Assets revealed when a category is first shown
        load_more_increment: Assets added by each "View More"
        cart_preview_limit: Items listed in the expanded cart before "+N more"
        catalog_path: Catalog file to load, None for the packaged catalog
        strict_validation: Validate the catalog with the full JSON schema

    Example:
        >>> config = StoreConfig(page_size=12, load_more_increment=12)
        >>> config.page_size
        12
    """

    # Pagination (6 columns × 3 rows)
    page_size: int = 18
    load_more_increment: int = 18

    # Cart view
    cart_preview_limit: int = 20

    # Catalog
    catalog_path: Optional[Path] = None
    strict_validation: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive: {self.page_size}")
        if self.load_more_increment <= 0:
            raise ValueError(
                f"load_more_increment must be positive: {self.load_more_increment}"
            )
        if self.cart_preview_limit <= 0:
            raise ValueError(
                f"cart_preview_limit must be positive: {self.cart_preview_limit}"
            )
