"""
Module: store.selection.store

Purpose:
    The single source of truth for which asset ids are selected.
    Knows nothing about prices, categories or views; ids are opaque.

Key Classes:
    - SelectionStore: Mutable id set with change notification

Used By:
    - store.selection.packs.PackController
    - store.controller.Storefront
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List

logger = logging.getLogger(__name__)

SelectionListener = Callable[[frozenset], None]


class SelectionStore:
    """
    Set of selected asset ids.

    Every mutation that changes membership notifies subscribers with the
    new selection, after the change is committed. Redundant operations
    (selecting a selected id, clearing an empty store) change nothing
    and notify no one.

    Unknown ids are accepted: the store cannot tell them apart from real
    ones. Consumers intersect with the catalog when deriving totals.

    Example:
        >>> store = SelectionStore()
        >>> store.toggle("scissors-001")
        True
        >>> store.is_selected("scissors-001")
        True
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._selected: set[str] = set(initial)
        self._listeners: List[SelectionListener] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def toggle(self, asset_id: str) -> bool:
        """
        Flip membership of one id.

        Returns:
            True if the id is selected afterwards
        """
        if asset_id in self._selected:
            self._selected.discard(asset_id)
            selected = False
        else:
            self._selected.add(asset_id)
            selected = True
        logger.debug(f"Toggled {asset_id} -> {'on' if selected else 'off'}")
        self._notify()
        return selected

    def select_many(self, asset_ids: Iterable[str]) -> int:
        """
        Union ids into the selection.

        Returns:
            Number of ids newly selected
        """
        added = {i for i in asset_ids if i not in self._selected}
        if added:
            self._selected |= added
            logger.debug(f"Selected {len(added)} ids")
            self._notify()
        return len(added)

    def deselect_many(self, asset_ids: Iterable[str]) -> int:
        """
        Remove ids from the selection.

        Returns:
            Number of ids actually removed
        """
        removed = {i for i in asset_ids if i in self._selected}
        if removed:
            self._selected -= removed
            logger.debug(f"Deselected {len(removed)} ids")
            self._notify()
        return len(removed)

    def clear(self) -> int:
        """
        Empty the selection unconditionally.

        Returns:
            Number of ids that were selected
        """
        count = len(self._selected)
        if count:
            self._selected.clear()
            logger.debug(f"Cleared {count} ids")
            self._notify()
        return count

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def is_selected(self, asset_id: str) -> bool:
        return asset_id in self._selected

    @property
    def ids(self) -> frozenset:
        """Immutable copy of the current selection."""
        return frozenset(self._selected)

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    # ─────────────────────────────────────────────────────────────────────────
    # Subscriptions
    # ─────────────────────────────────────────────────────────────────────────

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Register a change listener.

        Args:
            listener: Called with the committed selection after each change

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        current = self.ids
        for listener in list(self._listeners):
            listener(current)

    def __repr__(self) -> str:
        return f"SelectionStore(selected={len(self._selected)})"
