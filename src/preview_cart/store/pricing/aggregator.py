"""
Module: store.pricing.aggregator

Purpose:
    Pure derivations from (catalog, selection): the cart snapshot, the
    ordered list of selected assets and the truncated cart preview.

Key Functions:
    - snapshot(): CartSnapshot for the current selection
    - selected_assets(): Selected assets in catalog order
    - cart_preview(): First N selected assets plus an overflow count

Rules:
    - Nothing here is cached; every call reflects exactly the state passed in
    - Selected ids missing from the catalog are ignored (they are inert)
    - Each asset contributes its own price, defaulting to the flat rate

Used By:
    - store.controller.Storefront
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import AbstractSet, Iterable

from preview_cart.common.pricing import ZERO
from preview_cart.core.models import Asset, CartSnapshot, Catalog


def snapshot(catalog: Catalog, selection: Iterable[str]) -> CartSnapshot:
    """
    Compute cart totals for a selection.

    Runs in O(len(selection)): each id is looked up in the catalog index.

    Args:
        catalog: Catalog supplying prices and the set of valid ids
        selection: Selected asset ids; duplicates count once

    Returns:
        CartSnapshot

    Example:
        >>> snapshot(catalog, {"scissors-001", "scissors-002", "paper-001"})
        CartSnapshot(selected_count=3, total_price=Decimal('0.78'), ...)
    """
    pricing = catalog.pricing
    count = 0
    total = ZERO
    for asset_id in frozenset(selection):
        asset = catalog.get(asset_id)
        if asset is None:
            continue
        count += 1
        total += catalog.price_of(asset)

    amount_to_minimum = max(ZERO, pricing.minimum_cart - total)
    items_to_minimum = math.ceil(amount_to_minimum / pricing.price_per_item)

    return CartSnapshot(
        selected_count=count,
        total_price=total,
        is_above_minimum=total >= pricing.minimum_cart,
        amount_to_minimum=amount_to_minimum,
        items_to_minimum=items_to_minimum,
    )


def selected_assets(catalog: Catalog, selection: AbstractSet[str]) -> tuple[Asset, ...]:
    """Selected assets in catalog order."""
    return tuple(asset for asset in catalog.assets if asset.id in selection)


@dataclass(frozen=True)
class CartPreview:
    """
    Items listed in the expanded cart.

    Attributes:
        items: Up to ``limit`` selected assets, catalog order
        overflow_count: Selected assets not listed ("+N more items")
    """

    items: tuple[Asset, ...]
    overflow_count: int = 0

    @property
    def overflow_label(self) -> str:
        if self.overflow_count <= 0:
            return ""
        return f"+{self.overflow_count} more items"


def cart_preview(
    catalog: Catalog,
    selection: AbstractSet[str],
    limit: int = 20,
) -> CartPreview:
    """
    Build the cart item list, truncated to ``limit`` entries.

    Args:
        catalog: Catalog to order and resolve ids against
        selection: Selected asset ids
        limit: Maximum number of listed items

    Returns:
        CartPreview
    """
    chosen = selected_assets(catalog, selection)
    return CartPreview(
        items=chosen[:limit],
        overflow_count=max(0, len(chosen) - limit),
    )
