"""Progressive reveal of catalog items."""

from .pagination import PaginationWindow

__all__ = ["PaginationWindow"]
