"""
Unit tests for catalog schema validation.
"""

import copy

import pytest

from preview_cart.core.schemas import ValidationError, validate_catalog


VALID = {
    "schema_version": 1,
    "pricing": {"price_per_item": "0.26", "minimum_cart": "6.99", "bundle_price": "39.00"},
    "categories": [{"id": "scissors", "label": "Scissors & Cutting", "emoji": "✂️"}],
    "assets": [
        {"id": "scissors-001", "name": "Classic Scissors", "category": "scissors", "emoji": "✂️"},
    ],
}


@pytest.fixture
def data():
    return copy.deepcopy(VALID)


class TestValidateCatalog:

    def test_validate_when_valid_then_passes(self, data):
        validate_catalog(data)
        validate_catalog(data, strict=True)

    def test_validate_when_not_object_then_raises_error(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_catalog([])

    def test_validate_when_missing_assets_then_lists_field(self, data):
        del data["assets"]
        with pytest.raises(ValidationError) as exc_info:
            validate_catalog(data)
        assert exc_info.value.errors == ["Missing field: assets"]

    def test_validate_when_wrong_version_then_raises_error(self, data):
        data["schema_version"] = 2
        with pytest.raises(ValidationError, match="Unsupported catalog schema version") as exc_info:
            validate_catalog(data)
        assert exc_info.value.path == "schema_version"

    def test_validate_when_duplicate_asset_then_reports_path(self, data):
        data["assets"].append(dict(data["assets"][0]))
        with pytest.raises(ValidationError, match="Duplicate asset id") as exc_info:
            validate_catalog(data)
        assert exc_info.value.path == "assets[1].id"

    def test_validate_when_unknown_category_then_raises_error(self, data):
        data["assets"][0]["category"] = "glue"
        with pytest.raises(ValidationError, match="unknown category"):
            validate_catalog(data)

    def test_validate_when_strict_and_bad_price_then_raises_error(self, data):
        data["pricing"]["price_per_item"] = "twenty-six cents"
        validate_catalog(data)  # basic checks do not parse prices
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_catalog(data, strict=True)

    def test_validate_when_strict_and_all_category_then_raises_error(self, data):
        data["categories"].append({"id": "all", "label": "All"})
        with pytest.raises(ValidationError):
            validate_catalog(data, strict=True)
