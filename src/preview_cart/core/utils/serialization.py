"""
Serialization Utilities

Provides to/from JSON utilities for the catalog.

- ``load_catalog()`` reads a catalog file, validates it and builds the
  immutable ``Catalog``.
- ``serialize_catalog()`` / ``deserialize_catalog()`` convert between
  the model and its JSON-ready dictionary.
- Calculated values (category counts, pack prices) are never written.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..models.assets import Asset, Category
from ..models.catalog import Catalog, Pricing
from ..schemas.validator import CATALOG_SCHEMA_VERSION, ValidationError, validate_catalog

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Error loading a catalog file."""
    pass


def default_catalog_path() -> Path:
    """Path of the catalog shipped with the package."""
    return Path(__file__).resolve().parents[2] / "data" / "catalog.json"


def load_catalog(path: Optional[Path] = None, *, strict: bool = False) -> Catalog:
    """
    Load and validate a catalog file.

    Args:
        path: Catalog JSON file; defaults to the packaged catalog
        strict: Run full jsonschema validation as well as basic checks

    Returns:
        Catalog instance

    Raises:
        CatalogLoadError: If the file cannot be read, parsed or validated
    """
    catalog_path = Path(path) if path is not None else default_catalog_path()

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog {catalog_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog {catalog_path} is not valid JSON: {e}") from e

    try:
        catalog = deserialize_catalog(data, strict=strict)
    except ValidationError as e:
        location = f" at {e.path}" if e.path else ""
        raise CatalogLoadError(f"Invalid catalog {catalog_path}{location}: {e}") from e
    except ValueError as e:
        raise CatalogLoadError(f"Invalid catalog {catalog_path}: {e}") from e

    logger.info(
        f"Loaded catalog from {catalog_path}: "
        f"{len(catalog)} assets in {len(catalog.categories)} categories"
    )
    return catalog


def deserialize_catalog(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Catalog:
    """
    Deserialize a Catalog from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building models
        strict: Use full jsonschema validation

    Returns:
        Catalog instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If the data violates a model invariant
    """
    if validate:
        validate_catalog(data, strict=strict)

    pricing_data = data["pricing"]
    pricing = Pricing(
        price_per_item=pricing_data["price_per_item"],
        minimum_cart=pricing_data["minimum_cart"],
        bundle_price=pricing_data.get("bundle_price", Pricing.bundle_price),
    )

    categories = tuple(
        Category(id=c["id"], label=c["label"], emoji=c.get("emoji", ""))
        for c in data["categories"]
    )
    assets = tuple(
        Asset(
            id=a["id"],
            name=a["name"],
            category=a["category"],
            emoji=a.get("emoji", ""),
            price=a.get("price"),
        )
        for a in data["assets"]
    )

    return Catalog(assets=assets, categories=categories, pricing=pricing)


def serialize_catalog(catalog: Catalog) -> dict[str, Any]:
    """
    Serialize a Catalog to a dictionary.

    The output can be written to JSON and will pass validation.
    """
    return {
        "schema_version": CATALOG_SCHEMA_VERSION,
        "pricing": catalog.pricing.to_dict(),
        "categories": [c.to_dict() for c in catalog.categories],
        "assets": [a.to_dict() for a in catalog.assets],
    }
