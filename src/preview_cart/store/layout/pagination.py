"""
Module: store.layout.pagination

Purpose:
    Track how many assets of the active category are materialized for
    display. "View More" reveals another increment; nothing already
    revealed is ever hidden again while the category stays active.

Key Classes:
    - PaginationWindow: Clamped, monotonic reveal counter

Rules:
    1. visible_count starts at the page size, clamped to the list size
    2. load_more() adds the increment, clamped to the list size
    3. reset() (category switch) starts over at the page size
    4. The window never reads or writes the selection

Used By:
    - store.controller.Storefront
"""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginationWindow:
    """
    Reveal counter for one category view.

    Attributes:
        page_size: Initial number of revealed items
        increment: Items added per load_more()
        total: Size of the list being paginated

    Example:
        >>> window = PaginationWindow(total=40, page_size=18, increment=18)
        >>> window.visible_count
        18
        >>> window.load_more()
        36
        >>> window.load_more()
        40
    """

    def __init__(self, total: int, page_size: int = 18, increment: int = 18) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive: {page_size}")
        if increment <= 0:
            raise ValueError(f"increment must be positive: {increment}")
        self.page_size = page_size
        self.increment = increment
        self.total = 0
        self._visible = 0
        self.reset(total)

    @property
    def visible_count(self) -> int:
        return self._visible

    @property
    def remaining_count(self) -> int:
        """Items not yet revealed ("View More (N remaining)")."""
        return self.total - self._visible

    @property
    def has_more(self) -> bool:
        return self.remaining_count > 0

    def reveal(self, items: Sequence[T]) -> tuple[T, ...]:
        """First visible_count items of the list (all of them if fewer)."""
        return tuple(items[: self._visible])

    def load_more(self) -> int:
        """
        Reveal the next increment.

        Returns:
            The new visible_count
        """
        before = self._visible
        self._visible = min(self._visible + self.increment, self.total)
        logger.debug(f"Load more: {before} -> {self._visible} of {self.total}")
        return self._visible

    def reset(self, total: int) -> None:
        """Start over for a list of a (possibly) different size."""
        if total < 0:
            raise ValueError(f"total must be non-negative: {total}")
        self.total = total
        self._visible = min(self.page_size, total)

    def __repr__(self) -> str:
        return f"PaginationWindow(visible={self._visible}/{self.total})"
