"""Infrastructure adapters (catalog files)."""

from .catalog_loader import load_catalog, resolve_catalog

__all__ = [
    "load_catalog",
    "resolve_catalog",
]
