"""
Schema Validation Utilities

Validates catalog JSON before it is turned into model objects.

Basic structural checks always run and report the first problem with
a dotted path. Strict mode additionally validates the whole document
against ``catalog.schema.json`` with jsonschema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


CATALOG_SCHEMA_VERSION = 1

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_catalog(data: Any, *, strict: bool = False) -> None:
    """
    Validate catalog data.

    Args:
        data: Parsed catalog JSON
        strict: If True, also run full jsonschema validation

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Catalog must be a JSON object")

    required = ["schema_version", "pricing", "categories", "assets"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != CATALOG_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported catalog schema version: {version} (expected {CATALOG_SCHEMA_VERSION})",
            path="schema_version"
        )

    pricing = data["pricing"]
    if not isinstance(pricing, dict):
        raise ValidationError("pricing must be an object", path="pricing")
    for key in ("price_per_item", "minimum_cart"):
        if key not in pricing:
            raise ValidationError(f"pricing missing {key}", path=f"pricing.{key}")

    categories = data["categories"]
    if not isinstance(categories, list):
        raise ValidationError("categories must be a list", path="categories")
    category_ids: set[str] = set()
    for i, category in enumerate(categories):
        _validate_entry(category, ["id", "label"], f"categories[{i}]")
        if category["id"] in category_ids:
            raise ValidationError(
                f"Duplicate category id: {category['id']!r}",
                path=f"categories[{i}].id"
            )
        category_ids.add(category["id"])

    assets = data["assets"]
    if not isinstance(assets, list):
        raise ValidationError("assets must be a list", path="assets")
    asset_ids: set[str] = set()
    for i, asset in enumerate(assets):
        _validate_entry(asset, ["id", "name", "category"], f"assets[{i}]")
        if asset["id"] in asset_ids:
            raise ValidationError(
                f"Duplicate asset id: {asset['id']!r}",
                path=f"assets[{i}].id"
            )
        asset_ids.add(asset["id"])
        if asset["category"] not in category_ids:
            raise ValidationError(
                f"Asset {asset['id']!r} has unknown category {asset['category']!r}",
                path=f"assets[{i}].category"
            )

    if strict:
        schema = _load_schema("catalog")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def _validate_entry(entry: Any, required: list[str], path: str) -> None:
    """Check an object entry has the required string fields."""
    if not isinstance(entry, dict):
        raise ValidationError("Entry must be an object", path=path)
    missing = [f for f in required if f not in entry]
    if missing:
        raise ValidationError(
            f"Entry missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )
    for field_name in required:
        if not isinstance(entry[field_name], str):
            raise ValidationError(
                f"{field_name} must be a string",
                path=f"{path}.{field_name}"
            )
