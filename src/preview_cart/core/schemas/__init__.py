"""Catalog schema validation."""

from .validator import CATALOG_SCHEMA_VERSION, ValidationError, validate_catalog

__all__ = ["CATALOG_SCHEMA_VERSION", "ValidationError", "validate_catalog"]
