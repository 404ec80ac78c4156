"""
Module: snapshot

Purpose:
    Provides the CartSnapshot dataclass - the derived cart totals the
    presentation reads. A snapshot is produced fresh by
    store.pricing.aggregator.snapshot() on every read and never cached.

Key Classes:
    - CartSnapshot: Count, total, minimum gating and shortfall

Used By:
    - store.pricing.aggregator
    - store.view.cart_view
    - gui.cart_bridge
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class CartSnapshot:
    """
    Cart totals at one moment (immutable).

    Attributes:
        selected_count: Number of selected ids present in the catalog
        total_price: Sum of the selected assets' prices
        is_above_minimum: total_price >= minimum_cart
        amount_to_minimum: max(0, minimum_cart - total_price)
        items_to_minimum: Flat-rate items still needed to reach the minimum

    Invariants:
        - is_above_minimum implies amount_to_minimum == 0
        - amount_to_minimum >= 0

    Example:
        >>> snap = CartSnapshot(3, Decimal("0.78"), False, Decimal("6.21"), 24)
        >>> snap.is_empty
        False
    """

    selected_count: int
    total_price: Decimal
    is_above_minimum: bool
    amount_to_minimum: Decimal
    items_to_minimum: int = 0

    @property
    def is_empty(self) -> bool:
        return self.selected_count == 0

    def to_dict(self) -> dict[str, Any]:
        """Plain-value form for the presentation layer."""
        return {
            "selected_count": self.selected_count,
            "total_price": str(self.total_price),
            "is_above_minimum": self.is_above_minimum,
            "amount_to_minimum": str(self.amount_to_minimum),
            "items_to_minimum": self.items_to_minimum,
        }
