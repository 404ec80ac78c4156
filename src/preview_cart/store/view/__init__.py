"""Collapsed / expanded cart presentation state."""

from .cart_view import CartDisplay, CartView, CartViewState

__all__ = ["CartDisplay", "CartView", "CartViewState"]
