"""Resistor catalogs available to the feedback solver."""

from .models import ResistorCatalog
from .lcsc_0402 import LCSC_0402_CATALOG, RESISTOR_TO_0402_LCSC

__all__ = [
    "ResistorCatalog",
    "LCSC_0402_CATALOG",
    "RESISTOR_TO_0402_LCSC",
]
