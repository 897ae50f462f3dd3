"""Immutable catalog of standard resistor values."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Tuple

from ..errors import ConfigurationError


class ResistorCatalog:
    """Ordered, read-only mapping from resistance (ohms) to vendor part id.

    Values are kept in ascending order so that every search over the
    catalog enumerates candidates in the same sequence.
    """

    __slots__ = ("_parts", "_values")

    def __init__(self, parts: Mapping[float, str]):
        if not parts:
            raise ConfigurationError("Resistor catalog must contain at least one value")

        checked = [
            (_check_value(value), _check_part_id(value, part_id))
            for value, part_id in parts.items()
        ]
        ordered = dict(sorted(checked))

        self._parts: Mapping[float, str] = MappingProxyType(ordered)
        self._values: Tuple[float, ...] = tuple(ordered)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, str]]) -> ResistorCatalog:
        """Build a catalog from (value, part id) pairs, rejecting repeated values."""

        parts: dict[float, str] = {}
        for value, part_id in pairs:
            if value in parts:
                raise ConfigurationError(f"Duplicate resistor value in catalog: {value}")
            parts[value] = part_id
        return cls(parts)

    def values(self) -> Tuple[float, ...]:
        """Return the catalog values in ascending order."""
        return self._values

    def part_id(self, value: float) -> str:
        """Return the part identifier stocked for ``value``."""
        try:
            return self._parts[value]
        except KeyError:
            raise LookupError(f"{value} ohm is not a catalog value") from None

    def items(self) -> Iterable[tuple[float, str]]:
        return self._parts.items()

    def __contains__(self, value: object) -> bool:
        return value in self._parts

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResistorCatalog({len(self)} values, {self._values[0]:g}..{self._values[-1]:g} ohm)"


def _check_value(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"Catalog value must be numeric, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"Catalog value must be positive and finite, got {value}")
    return value


def _check_part_id(value: float, part_id: str) -> str:
    if not isinstance(part_id, str) or not part_id.strip():
        raise ConfigurationError(f"Catalog value {value} has no part identifier")
    return part_id
