"""
Module: store.view.cart_view

Purpose:
    The cart widget's state machine and the render model the
    presentation layer reads from it.

Key Classes:
    - CartViewState: HIDDEN / COLLAPSED_BADGE / EXPANDED
    - CartView: Transitions driven by selection count and open/close
    - CartDisplay: Everything needed to draw the cart once

State Machine:
    HIDDEN ──(count 0 → >0)──▶ COLLAPSED_BADGE ──open──▶ EXPANDED
    EXPANDED ──close──▶ COLLAPSED_BADGE
    any ──(count → 0, incl. clear)──▶ HIDDEN

    Checkout availability is not a state: it is read from the snapshot
    every time a CartDisplay is built.

Used By:
    - store.controller.Storefront
    - gui.cart_bridge.CartBridge
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from preview_cart.common.pricing import format_price
from preview_cart.core.models import Asset, CartSnapshot, Catalog

from ..pricing.aggregator import CartPreview

logger = logging.getLogger(__name__)


class CartViewState(Enum):
    HIDDEN = "hidden"
    COLLAPSED_BADGE = "collapsed_badge"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class CartDisplay:
    """
    Render model for the cart widget (immutable).

    Attributes:
        state: Current view state
        badge_count: Item count shown on the badge
        price_label: Formatted cart total
        below_minimum: Total has not reached the minimum
        show_warning: Expanded and below minimum
        warning_message: "Add $X more to checkout" when show_warning
        checkout_enabled: Expanded and at or above minimum
        subtotal_label: "Subtotal (N items)"
        items: Listed cart items
        overflow_label: "+N more items" or ""
        show_bundle_offer: Not every catalog asset is selected yet
        bundle_offer_label: "Get all N for $X (save $Y)"
        aria_label: Accessible label of the collapsed button
    """

    state: CartViewState
    badge_count: int
    price_label: str
    below_minimum: bool
    show_warning: bool
    warning_message: str
    checkout_enabled: bool
    subtotal_label: str
    items: tuple[Asset, ...]
    overflow_label: str
    show_bundle_offer: bool
    bundle_offer_label: str
    aria_label: str

    @property
    def visible(self) -> bool:
        return self.state is not CartViewState.HIDDEN


class CartView:
    """
    Cart widget state machine.

    Example:
        >>> view = CartView()
        >>> view.on_selection_count(3)
        >>> view.state
        <CartViewState.COLLAPSED_BADGE: 'collapsed_badge'>
        >>> view.open()
        True
    """

    def __init__(self) -> None:
        self._state = CartViewState.HIDDEN

    @property
    def state(self) -> CartViewState:
        return self._state

    @property
    def is_expanded(self) -> bool:
        return self._state is CartViewState.EXPANDED

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def on_selection_count(self, selected_count: int) -> None:
        """Follow the selection count: empty hides, first item shows the badge."""
        if selected_count <= 0:
            self._set(CartViewState.HIDDEN)
        elif self._state is CartViewState.HIDDEN:
            self._set(CartViewState.COLLAPSED_BADGE)

    def open(self) -> bool:
        """
        Expand the collapsed badge.

        Returns:
            True if the cart is expanded afterwards; a hidden cart stays hidden
        """
        if self._state is CartViewState.HIDDEN:
            logger.debug("Ignoring open on an empty cart")
            return False
        self._set(CartViewState.EXPANDED)
        return True

    def close(self) -> bool:
        """
        Collapse the expanded panel (close button, Escape, click outside).

        Returns:
            True if the panel was expanded and is now collapsed
        """
        if self._state is not CartViewState.EXPANDED:
            return False
        self._set(CartViewState.COLLAPSED_BADGE)
        return True

    def _set(self, state: CartViewState) -> None:
        if state is not self._state:
            logger.debug(f"Cart view {self._state.value} -> {state.value}")
            self._state = state

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render(
        self,
        snapshot: CartSnapshot,
        preview: CartPreview,
        catalog: Catalog,
    ) -> CartDisplay:
        """
        Build the render model from the current snapshot.

        Args:
            snapshot: Totals computed after the latest mutation
            preview: Listed cart items
            catalog: Catalog for the bundle offer

        Returns:
            CartDisplay
        """
        expanded = self.is_expanded
        below_minimum = not snapshot.is_above_minimum
        count = snapshot.selected_count
        price_label = format_price(snapshot.total_price)
        total_assets = len(catalog)

        return CartDisplay(
            state=self._state,
            badge_count=count,
            price_label=price_label,
            below_minimum=below_minimum,
            show_warning=expanded and below_minimum,
            warning_message=(
                f"Add {format_price(snapshot.amount_to_minimum)} more to checkout"
                if expanded and below_minimum else ""
            ),
            checkout_enabled=expanded and not below_minimum,
            subtotal_label=f"Subtotal ({count} items)",
            items=preview.items,
            overflow_label=preview.overflow_label,
            show_bundle_offer=count < total_assets,
            bundle_offer_label=(
                f"Get all {total_assets} for {format_price(catalog.pricing.bundle_price)} "
                f"(save {format_price(catalog.bundle_savings)})"
            ),
            aria_label=f"Shopping cart, {count} items, {price_label}",
        )
