"""Selection state and category pack logic."""

from .store import SelectionListener, SelectionStore
from .packs import PackController, PackState

__all__ = [
    "SelectionListener",
    "SelectionStore",
    "PackController",
    "PackState",
]
