"""
Qt bridge between a Storefront session and a presentation layer.

Widgets call the bridge's slots instead of the Storefront directly and
listen to its signals to re-render. Signals are emitted synchronously
after the underlying mutation has been committed, so a slot connected
to ``snapshotChanged`` always receives totals for the new selection.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from preview_cart.store import CartDisplay, CartViewState, Storefront

logger = logging.getLogger(__name__)


class CartBridge(QObject):
    """Signal/slot facade over a Storefront."""

    selectionChanged = Signal(int)        # selected count
    snapshotChanged = Signal(dict)        # CartSnapshot.to_dict()
    cartStateChanged = Signal(str)        # CartViewState value
    visibleAssetsChanged = Signal(int)    # visible count of active category
    categoryChanged = Signal(str)         # active category id

    def __init__(self, storefront: Storefront, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.storefront = storefront
        self._last_state = storefront.cart_state
        unsubscribe = storefront.subscribe(self._on_selection_changed)
        self._unsubscribe = unsubscribe
        # Qt may delete the bridge (e.g. with its parent) before the storefront
        self.destroyed.connect(lambda *_: unsubscribe())

    def detach(self) -> None:
        """Stop listening to the storefront."""
        self._unsubscribe()

    # ─────────────────────────────────────────────────────────────────────────
    # Slots
    # ─────────────────────────────────────────────────────────────────────────

    @Slot(str)
    def toggle_asset(self, asset_id: str) -> None:
        self.storefront.toggle_asset(asset_id)

    @Slot(str)
    def toggle_pack(self, category_id: str = "") -> None:
        self.storefront.toggle_pack(category_id or None)

    @Slot()
    def select_all(self) -> None:
        self.storefront.select_all()

    @Slot()
    def clear_cart(self) -> None:
        self.storefront.clear_cart()

    @Slot(str)
    def select_category(self, category_id: str) -> None:
        if self.storefront.select_category(category_id):
            self.categoryChanged.emit(category_id)
            self.visibleAssetsChanged.emit(self.storefront.window.visible_count)

    @Slot()
    def load_more(self) -> None:
        before = self.storefront.window.visible_count
        after = self.storefront.load_more()
        if after != before:
            self.visibleAssetsChanged.emit(after)

    @Slot()
    def open_cart(self) -> None:
        self.storefront.open_cart()
        self._emit_state()

    @Slot()
    def close_cart(self) -> None:
        self.storefront.close_cart()
        self._emit_state()

    # ─────────────────────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────────────────────

    def display(self) -> CartDisplay:
        return self.storefront.cart_display()

    @property
    def cart_state(self) -> CartViewState:
        return self.storefront.cart_state

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _on_selection_changed(self, selected: frozenset) -> None:
        snap = self.storefront.get_cart_snapshot()
        self.selectionChanged.emit(snap.selected_count)
        self.snapshotChanged.emit(snap.to_dict())
        self._emit_state()

    def _emit_state(self) -> None:
        state = self.storefront.cart_state
        if state is not self._last_state:
            logger.debug(f"Cart state changed to {state.value}")
            self._last_state = state
            self.cartStateChanged.emit(state.value)
