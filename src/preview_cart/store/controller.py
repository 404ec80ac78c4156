"""
Module: store.controller

Purpose:
    Wire the catalog, selection store, pack logic, pagination window,
    aggregator and cart view into one storefront session, and expose the
    action and read entry points the presentation layer calls.

Key Classes:
    - Storefront: One browsing session over a catalog

Action Entry Points:
    toggle_asset, toggle_pack, select_all, select_category, load_more,
    clear_cart, open_cart, close_cart

Read Entry Points:
    get_cart_snapshot, is_asset_selected, is_pack_fully_selected,
    is_pack_partially_selected, pack_state, visible_assets, cart_display

Ordering:
    Every action mutates the SelectionStore synchronously; the cart view
    follows through the store's notification, and snapshots are computed
    on read. A read after an action therefore always sees the committed
    mutation.

Dependencies:
    - store.selection: SelectionStore, PackController
    - store.layout: PaginationWindow
    - store.pricing: snapshot, cart_preview
    - store.view: CartView

Used By:
    - gui.cart_bridge.CartBridge
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from preview_cart.core.models import ALL_CATEGORY, Asset, CartSnapshot, Catalog, Category
from preview_cart.core.utils.serialization import load_catalog

from .config import StoreConfig
from .layout import PaginationWindow
from .pricing import cart_preview, selected_assets, snapshot
from .selection import PackController, PackState, SelectionStore
from .view import CartDisplay, CartView, CartViewState

logger = logging.getLogger(__name__)


class Storefront:
    """
    A storefront session.

    Attributes:
        catalog: The read-only catalog
        config: Session configuration
        selection: Selected asset ids
        packs: Pack toggling against ``selection``
        window: Reveal window of the active category
        cart_view: Collapsed / expanded cart state

    Example:
        >>> shop = Storefront.from_config(StoreConfig())
        >>> shop.toggle_pack("scissors")
        <PackState.FULL: 'full'>
        >>> shop.get_cart_snapshot().selected_count
        18
    """

    def __init__(self, catalog: Catalog, config: Optional[StoreConfig] = None) -> None:
        self.catalog = catalog
        self.config = config or StoreConfig()
        self.selection = SelectionStore()
        self.packs = PackController(self.selection)
        self.cart_view = CartView()
        self._active_category = ALL_CATEGORY
        self.window = PaginationWindow(
            total=len(self.catalog),
            page_size=self.config.page_size,
            increment=self.config.load_more_increment,
        )
        self.selection.subscribe(self._on_selection_changed)

    @classmethod
    def from_config(cls, config: StoreConfig) -> Storefront:
        """
        Load the configured catalog and start a session.

        Raises:
            CatalogLoadError: If the catalog cannot be loaded
        """
        catalog = load_catalog(config.catalog_path, strict=config.strict_validation)
        return cls(catalog, config)

    def subscribe(self, listener: Callable[[frozenset], None]) -> Callable[[], None]:
        """Register a selection listener; returns the unsubscribe callable."""
        return self.selection.subscribe(listener)

    def _on_selection_changed(self, selected: frozenset) -> None:
        self.cart_view.on_selection_count(snapshot(self.catalog, selected).selected_count)

    # ─────────────────────────────────────────────────────────────────────────
    # Selection actions
    # ─────────────────────────────────────────────────────────────────────────

    def toggle_asset(self, asset_id: str) -> bool:
        """
        Toggle one asset.

        Ids not in the catalog are ignored rather than stored, so the
        selection never holds orphans.

        Returns:
            True if the asset is selected afterwards
        """
        if asset_id not in self.catalog:
            logger.warning(f"Ignoring toggle of unknown asset {asset_id!r}")
            return False
        return self.selection.toggle(asset_id)

    def toggle_pack(self, category_id: Optional[str] = None) -> PackState:
        """
        Toggle a whole category (the active one by default).

        The pack is every asset of the category, not only the revealed
        page. Unknown categories are empty packs and change nothing.

        Returns:
            Pack state after the toggle
        """
        pack_ids = self._pack_ids(category_id)
        if not pack_ids:
            logger.warning(f"Ignoring toggle of empty pack {category_id!r}")
        return self.packs.toggle_pack(pack_ids)

    def select_all(self) -> int:
        """
        Select the whole catalog (the bundle offer).

        Returns:
            Number of newly selected assets
        """
        return self.selection.select_many(self.catalog.ids)

    def clear_cart(self) -> int:
        """
        Empty the cart; the cart view hides.

        Returns:
            Number of assets that were selected
        """
        return self.selection.clear()

    # ─────────────────────────────────────────────────────────────────────────
    # Browsing actions
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def active_category(self) -> Category:
        return self._active_category

    def select_category(self, category_id: str) -> bool:
        """
        Switch the active category tab and reset its reveal window.

        The selection is untouched.

        Returns:
            True if the category exists and is now active
        """
        category = self.catalog.get_category(category_id)
        if category is None:
            logger.warning(f"Ignoring switch to unknown category {category_id!r}")
            return False
        self._active_category = category
        self.window.reset(self.catalog.category_count(category_id))
        return True

    def load_more(self) -> int:
        """
        Reveal the next page of the active category.

        Returns:
            The new number of visible assets
        """
        return self.window.load_more()

    def visible_assets(self) -> tuple[Asset, ...]:
        """Assets of the active category currently revealed."""
        return self.window.reveal(self.catalog.assets_in(self._active_category.id))

    @property
    def remaining_count(self) -> int:
        return self.window.remaining_count

    @property
    def has_more(self) -> bool:
        return self.window.has_more

    @property
    def shows_pack_header(self) -> bool:
        """The pack header is shown for real categories, not "all"."""
        return not self._active_category.is_all

    def end_of_list_label(self) -> str:
        """
        "Showing all N assets[ in Label]" once everything is revealed.

        Returns:
            The label, or "" while more assets remain or none are visible
        """
        if self.has_more or self.window.visible_count == 0:
            return ""
        label = f"Showing all {self.window.total} assets"
        if self.shows_pack_header:
            label += f" in {self.active_category.label}"
        return label

    # ─────────────────────────────────────────────────────────────────────────
    # Cart view actions
    # ─────────────────────────────────────────────────────────────────────────

    def open_cart(self) -> bool:
        return self.cart_view.open()

    def close_cart(self) -> bool:
        return self.cart_view.close()

    @property
    def cart_state(self) -> CartViewState:
        return self.cart_view.state

    # ─────────────────────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────────────────────

    def get_cart_snapshot(self) -> CartSnapshot:
        return snapshot(self.catalog, self.selection.ids)

    def is_asset_selected(self, asset_id: str) -> bool:
        return self.selection.is_selected(asset_id)

    def is_pack_fully_selected(self, category_id: Optional[str] = None) -> bool:
        return self.packs.is_pack_fully_selected(self._pack_ids(category_id))

    def is_pack_partially_selected(self, category_id: Optional[str] = None) -> bool:
        return self.packs.is_pack_partially_selected(self._pack_ids(category_id))

    def pack_state(self, category_id: Optional[str] = None) -> PackState:
        return self.packs.pack_state(self._pack_ids(category_id))

    def selected_assets(self) -> tuple[Asset, ...]:
        """Selected assets in catalog order."""
        return selected_assets(self.catalog, self.selection.ids)

    def cart_display(self) -> CartDisplay:
        """Render model of the cart widget, built from a fresh snapshot."""
        selected = self.selection.ids
        return self.cart_view.render(
            snapshot(self.catalog, selected),
            cart_preview(self.catalog, selected, self.config.cart_preview_limit),
            self.catalog,
        )

    def _pack_ids(self, category_id: Optional[str]) -> tuple[str, ...]:
        return self.catalog.ids_in(category_id or self._active_category.id)

    def __repr__(self) -> str:
        return (
            f"Storefront(category={self._active_category.id!r}, "
            f"selected={len(self.selection)}, cart={self.cart_view.state.value})"
        )
