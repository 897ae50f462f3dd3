"""Load resistor catalogs from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from feedback_designer.domain.catalog import LCSC_0402_CATALOG, ResistorCatalog
from feedback_designer.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> ResistorCatalog:
    """
    Read a catalog file shaped as ``{"<ohms>": "<part id>", ...}``.

    Keys are parsed as floats so "4700" and "4.7e3" both work; two keys
    naming the same resistance are rejected.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Resistor catalog file not found: {path}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Resistor catalog file {path} cannot be read: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Resistor catalog file {path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Resistor catalog file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Resistor catalog file {path} must contain a JSON object")

    pairs = []
    for key, part_id in data.items():
        try:
            value = float(key)
        except ValueError as exc:
            raise ConfigurationError(f"Catalog key {key!r} in {path} is not a resistance") from exc
        pairs.append((value, part_id))

    catalog = ResistorCatalog.from_pairs(pairs)
    logger.info(f"Loaded {len(catalog)} resistor values from {path}")
    return catalog


def resolve_catalog(catalog_path: Optional[str]) -> ResistorCatalog:
    """Return the configured catalog, or the built-in LCSC 0402 list."""
    if catalog_path:
        return load_catalog(catalog_path)
    return LCSC_0402_CATALOG
