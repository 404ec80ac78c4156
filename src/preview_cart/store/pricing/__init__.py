"""Cart totals derived from the selection and catalog."""

from .aggregator import CartPreview, cart_preview, selected_assets, snapshot

__all__ = ["CartPreview", "cart_preview", "selected_assets", "snapshot"]
