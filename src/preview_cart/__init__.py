"""Top-level package for the Preview Cart storefront engine.

Provides subpackages:
- preview_cart.core – catalog models, schema validation and serialization
- preview_cart.common – shared pricing helpers
- preview_cart.store – selection, pack, pagination and cart state
- preview_cart.gui – Qt bridge for presentation layers
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version, PackageNotFoundError
        return pkg_version("preview-cart")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
