import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import preview_cart
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from preview_cart.core.models import Asset, Catalog, Category, Pricing  # noqa: E402
from preview_cart.core.utils.serialization import load_catalog  # noqa: E402


def make_category_assets(category_id: str, count: int) -> list[Asset]:
    """Assets named ``<category>-001`` .. ``<category>-NNN``."""
    return [
        Asset(f"{category_id}-{i:03d}", f"{category_id.title()} {i}", category_id)
        for i in range(1, count + 1)
    ]


@pytest.fixture
def small_catalog() -> Catalog:
    """Nine assets across three categories, flat $0.26 pricing."""
    assets = (
        make_category_assets("scissors", 3)
        + make_category_assets("paper", 3)
        + make_category_assets("writing", 3)
    )
    categories = (
        Category("scissors", "Scissors & Cutting", "✂️"),
        Category("paper", "Paper & Cardstock", "📄"),
        Category("writing", "Writing Tools", "✏️"),
    )
    return Catalog(assets=tuple(assets), categories=categories, pricing=Pricing())


@pytest.fixture
def paged_catalog() -> Catalog:
    """An 18-asset category plus a 40-asset category."""
    assets = make_category_assets("scissors", 18) + make_category_assets("writing", 40)
    categories = (
        Category("scissors", "Scissors & Cutting"),
        Category("writing", "Writing Tools"),
    )
    return Catalog(assets=tuple(assets), categories=categories)


@pytest.fixture(scope="session")
def shipped_catalog() -> Catalog:
    """The catalog packaged with preview_cart."""
    return load_catalog(strict=True)

