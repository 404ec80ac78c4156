"""
Module: store.selection.packs

Purpose:
    "Add All" / "Remove Pack" logic for a group of asset ids (a pack),
    applied against a SelectionStore.

Key Classes:
    - PackState: EMPTY / NONE / PARTIAL / FULL
    - PackController: Pack queries and the bidirectional pack toggle

Policy:
    A partially selected pack counts as "off". Toggling it fills in the
    missing members, so one click always turns a pack fully "on"; only a
    fully selected pack is removed. A pack with no ids is never "full",
    so no "Remove Pack" button is shown for an empty category.

Used By:
    - store.controller.Storefront
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

from .store import SelectionStore

logger = logging.getLogger(__name__)


class PackState(Enum):
    """
    Selection state of a pack.

    Attributes:
        EMPTY: The pack has no ids; no pack button is shown
        NONE: No member selected ("Add All")
        PARTIAL: Some but not all members selected ("Add Rest")
        FULL: Every member selected ("Remove Pack")
    """

    EMPTY = "empty"
    NONE = "none"
    PARTIAL = "partial"
    FULL = "full"

    @property
    def button_label(self) -> Optional[str]:
        """Label of the pack toggle button, None when hidden."""
        return _BUTTON_LABELS[self]


_BUTTON_LABELS = {
    PackState.EMPTY: None,
    PackState.NONE: "Add All",
    PackState.PARTIAL: "Add Rest",
    PackState.FULL: "Remove Pack",
}


class PackController:
    """
    Pack operations over caller-supplied id lists.

    The controller holds no pack definitions: callers pass whichever ids
    make up the pack they are rendering.

    Example:
        >>> packs = PackController(SelectionStore())
        >>> packs.toggle_pack(["a", "b"])
        <PackState.FULL: 'full'>
        >>> packs.toggle_pack(["a", "b"])
        <PackState.NONE: 'none'>
    """

    def __init__(self, store: SelectionStore) -> None:
        self.store = store

    def pack_state(self, pack_ids: Sequence[str]) -> PackState:
        if not pack_ids:
            return PackState.EMPTY
        selected = sum(1 for i in pack_ids if self.store.is_selected(i))
        if selected == 0:
            return PackState.NONE
        if selected == len(pack_ids):
            return PackState.FULL
        return PackState.PARTIAL

    def is_pack_fully_selected(self, pack_ids: Sequence[str]) -> bool:
        """True iff the pack is non-empty and every id in it is selected."""
        if not pack_ids:
            return False
        return all(self.store.is_selected(i) for i in pack_ids)

    def is_pack_partially_selected(self, pack_ids: Sequence[str]) -> bool:
        return self.pack_state(pack_ids) is PackState.PARTIAL

    def toggle_pack(self, pack_ids: Sequence[str]) -> PackState:
        """
        Remove a fully selected pack, otherwise complete it.

        Args:
            pack_ids: Ids making up the pack

        Returns:
            Pack state after the toggle
        """
        if not pack_ids:
            logger.debug("Ignoring toggle of an empty pack")
            return PackState.EMPTY

        if self.is_pack_fully_selected(pack_ids):
            removed = self.store.deselect_many(pack_ids)
            logger.debug(f"Removed pack of {len(pack_ids)} ({removed} deselected)")
        else:
            added = self.store.select_many(pack_ids)
            logger.debug(f"Completed pack of {len(pack_ids)} ({added} added)")
        return self.pack_state(pack_ids)
