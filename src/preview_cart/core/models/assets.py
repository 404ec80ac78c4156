"""
Module: assets

Purpose:
    Provides the Asset and Category dataclasses - the immutable entries
    of the storefront catalog.

Key Classes:
    - Asset: One purchasable digital asset
    - Category: A named group of assets (a "pack")

Dependencies:
    - dataclasses (std)
    - decimal (std)

Used By:
    - core.models.catalog.Catalog
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from preview_cart.common.pricing import to_money


ALL_CATEGORY_ID = "all"


@dataclass(frozen=True)
class Asset:
    """
    One catalog entry (immutable).

    Attributes:
        id: Unique identifier, stable for the asset's lifetime
        name: Display name
        category: Id of the category this asset belongs to
        emoji: Thumbnail glyph shown by the presentation layer
        price: Per-asset price override, None means the flat catalog rate

    Invariants:
        - id and category are non-empty
        - price is None or >= 0

    Example:
        >>> Asset("scissors-001", "Classic Scissors", "scissors", "✂️")
        Asset('scissors-001', category='scissors')
    """

    id: str
    name: str
    category: str
    emoji: str = ""
    price: Optional[Decimal] = None

    def __post_init__(self) -> None:
        """Validate asset on construction."""
        if not self.id:
            raise ValueError("Asset id cannot be empty")
        if not self.category:
            raise ValueError(f"Asset {self.id} has no category")
        if self.price is not None:
            price = to_money(self.price)
            if price < 0:
                raise ValueError(f"Asset {self.id} price cannot be negative: {price}")
            object.__setattr__(self, "price", price)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "emoji": self.emoji,
        }
        if self.price is not None:
            data["price"] = str(self.price)
        return data

    def __repr__(self) -> str:
        return f"Asset({self.id!r}, category={self.category!r})"


@dataclass(frozen=True)
class Category:
    """
    A catalog category (immutable).

    The item count is not stored here; ask the Catalog, which derives
    it from the assets.

    Attributes:
        id: Category identifier, e.g. "scissors"
        label: Display label, e.g. "Scissors & Cutting"
        emoji: Tab glyph
    """

    id: str
    label: str
    emoji: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Category id cannot be empty")

    @property
    def is_all(self) -> bool:
        """True for the pseudo-category listing every asset."""
        return self.id == ALL_CATEGORY_ID

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "emoji": self.emoji}
