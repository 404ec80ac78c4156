"""Qt integration for presentation layers."""

from .cart_bridge import CartBridge

__all__ = ["CartBridge"]
