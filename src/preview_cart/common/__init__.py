"""Common utilities shared across the storefront engine."""

from __future__ import annotations

from .pricing import (
    CENT,
    ZERO,
    format_price,
    to_money,
)

__all__ = [
    "CENT",
    "ZERO",
    "format_price",
    "to_money",
]
