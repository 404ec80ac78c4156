"""
Module: store

Purpose:
    Asset selection and cart aggregation engine. Tracks which catalog
    assets are selected, how category packs are toggled, how much of a
    category is revealed, and derives the cart totals and cart widget
    state from that selection.

Key Functions:
    - snapshot(): Cart totals for a selection

Key Classes:
    - Storefront: Session facade with the action and read entry points
    - StoreConfig: Session configuration
    - SelectionStore: Selected id set
    - PackController: "Add All" / "Remove Pack"
    - PaginationWindow: Progressive reveal
    - CartView: Hidden / collapsed / expanded cart widget

Dependencies:
    - preview_cart.core.models: Catalog, Asset, CartSnapshot

Used By:
    - preview_cart.gui.cart_bridge: Qt presentation bridge
"""

from .config import StoreConfig
from .selection import PackController, PackState, SelectionStore
from .layout import PaginationWindow
from .pricing import CartPreview, cart_preview, selected_assets, snapshot
from .view import CartDisplay, CartView, CartViewState
from .controller import Storefront

__all__ = [
    # Config
    "StoreConfig",
    # Selection
    "SelectionStore",
    "PackController",
    "PackState",
    # Pagination
    "PaginationWindow",
    # Aggregation
    "CartPreview",
    "cart_preview",
    "selected_assets",
    "snapshot",
    # View
    "CartDisplay",
    "CartView",
    "CartViewState",
    # Controller
    "Storefront",
]
