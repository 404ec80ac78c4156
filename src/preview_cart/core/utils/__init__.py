"""Catalog serialization helpers."""

from .serialization import (
    CatalogLoadError,
    default_catalog_path,
    deserialize_catalog,
    load_catalog,
    serialize_catalog,
)

__all__ = [
    "CatalogLoadError",
    "default_catalog_path",
    "deserialize_catalog",
    "load_catalog",
    "serialize_catalog",
]
