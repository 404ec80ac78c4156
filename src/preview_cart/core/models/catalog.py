"""
Module: catalog

Purpose:
    Provides the Pricing and Catalog dataclasses. The Catalog is the
    read-only list of assets grouped by category, plus the pricing
    constants the cart is computed against.

Key Classes:
    - Pricing: Flat per-item rate, cart minimum, full-bundle price
    - Catalog: Immutable asset collection with O(1) id lookup

Key Functions:
    - Catalog.assets_in(category_id): Assets of a category, catalog order
    - Catalog.price_of(asset): Per-asset price, defaulting to the flat rate
    - Catalog.pack_price(category_id): Price of a whole category

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .assets.Asset, .assets.Category

Used By:
    - store.pricing.aggregator
    - store.controller.Storefront
    - core.utils.serialization

Design Notes:
    Category counts and pack prices are always calculated from the
    assets, never stored alongside them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import cached_property
from typing import Dict, Iterator, Optional

from preview_cart.common.pricing import ZERO, to_money

from .assets import ALL_CATEGORY_ID, Asset, Category


ALL_CATEGORY = Category(id=ALL_CATEGORY_ID, label="All", emoji="📦")


@dataclass(frozen=True)
class Pricing:
    """
    Pricing constants for a catalog (immutable).

    Attributes:
        price_per_item: Flat rate applied to every asset without an override
        minimum_cart: Minimum cart total before checkout is allowed
        bundle_price: Price of the "get everything" offer

    Invariants:
        - price_per_item > 0
        - minimum_cart >= 0
        - bundle_price >= 0
    """

    price_per_item: Decimal = Decimal("0.26")
    minimum_cart: Decimal = Decimal("6.99")
    bundle_price: Decimal = Decimal("39.00")

    def __post_init__(self) -> None:
        """Normalise to Decimal and validate."""
        for name in ("price_per_item", "minimum_cart", "bundle_price"):
            object.__setattr__(self, name, to_money(getattr(self, name)))
        if self.price_per_item <= 0:
            raise ValueError(f"price_per_item must be positive: {self.price_per_item}")
        if self.minimum_cart < 0:
            raise ValueError(f"minimum_cart must be non-negative: {self.minimum_cart}")
        if self.bundle_price < 0:
            raise ValueError(f"bundle_price must be non-negative: {self.bundle_price}")

    def to_dict(self) -> dict[str, str]:
        return {
            "price_per_item": str(self.price_per_item),
            "minimum_cart": str(self.minimum_cart),
            "bundle_price": str(self.bundle_price),
        }


@dataclass(frozen=True)
class Catalog:
    """
    The storefront catalog (immutable).

    Attributes:
        assets: All assets, in display order
        categories: Declared categories, in tab order (excluding "all")
        pricing: Pricing constants

    Invariants:
        - Asset ids are unique
        - Category ids are unique and none is "all"
        - Every asset's category is declared

    Example:
        >>> catalog = Catalog(assets=(asset,), categories=(scissors,))
        >>> catalog.category_count("scissors")
        1
        >>> catalog.assets_in("all") == catalog.assets
        True
    """

    assets: tuple[Asset, ...]
    categories: tuple[Category, ...]
    pricing: Pricing = Pricing()

    def __post_init__(self) -> None:
        """Validate catalog on construction."""
        object.__setattr__(self, "assets", tuple(self.assets))
        object.__setattr__(self, "categories", tuple(self.categories))

        category_ids = [c.id for c in self.categories]
        if len(category_ids) != len(set(category_ids)):
            raise ValueError("Duplicate category ids in catalog")
        if ALL_CATEGORY_ID in category_ids:
            raise ValueError(f"Category id {ALL_CATEGORY_ID!r} is reserved")

        seen: set[str] = set()
        declared = set(category_ids)
        for asset in self.assets:
            if asset.id in seen:
                raise ValueError(f"Duplicate asset id in catalog: {asset.id}")
            seen.add(asset.id)
            if asset.category not in declared:
                raise ValueError(
                    f"Asset {asset.id} references undeclared category {asset.category!r}"
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Indexes (built once, catalog is immutable)
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def _by_id(self) -> Dict[str, Asset]:
        return {asset.id: asset for asset in self.assets}

    @cached_property
    def _by_category(self) -> Dict[str, tuple[Asset, ...]]:
        grouped: Dict[str, list[Asset]] = {c.id: [] for c in self.categories}
        for asset in self.assets:
            grouped[asset.category].append(asset)
        return {cid: tuple(items) for cid, items in grouped.items()}

    @cached_property
    def ids(self) -> frozenset[str]:
        """All asset ids."""
        return frozenset(self._by_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.assets)

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self._by_id

    def get(self, asset_id: str) -> Optional[Asset]:
        """Find an asset by id, or None."""
        return self._by_id.get(asset_id)

    @property
    def tabs(self) -> tuple[Category, ...]:
        """Categories in tab order, led by the "all" pseudo-category."""
        return (ALL_CATEGORY,) + self.categories

    def get_category(self, category_id: str) -> Optional[Category]:
        """Find a category by id ("all" included), or None."""
        if category_id == ALL_CATEGORY_ID:
            return ALL_CATEGORY
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def assets_in(self, category_id: str) -> tuple[Asset, ...]:
        """
        Get the assets of a category in catalog order.

        Args:
            category_id: Category id, or "all" for every asset

        Returns:
            Tuple of assets; empty for an unknown category
        """
        if category_id == ALL_CATEGORY_ID:
            return self.assets
        return self._by_category.get(category_id, ())

    def ids_in(self, category_id: str) -> tuple[str, ...]:
        """Asset ids of a category in catalog order."""
        return tuple(asset.id for asset in self.assets_in(category_id))

    def category_count(self, category_id: str) -> int:
        return len(self.assets_in(category_id))

    # ─────────────────────────────────────────────────────────────────────────
    # Pricing
    # ─────────────────────────────────────────────────────────────────────────

    def price_of(self, asset: Asset) -> Decimal:
        """Per-asset price, falling back to the flat rate."""
        if asset.price is not None:
            return asset.price
        return self.pricing.price_per_item

    def pack_price(self, category_id: str) -> Decimal:
        """Sum of prices of every asset in a category."""
        return sum((self.price_of(a) for a in self.assets_in(category_id)), ZERO)

    @property
    def full_catalog_price(self) -> Decimal:
        """Price of every asset bought individually."""
        return self.pack_price(ALL_CATEGORY_ID)

    @property
    def bundle_savings(self) -> Decimal:
        """
        Saving of the bundle offer over buying everything individually.

        Never negative: a bundle priced above the item sum saves nothing.
        """
        return max(ZERO, self.full_catalog_price - self.pricing.bundle_price)

    def __repr__(self) -> str:
        return (
            f"Catalog(assets={len(self.assets)}, "
            f"categories={len(self.categories)}, "
            f"price_per_item={self.pricing.price_per_item})"
        )
