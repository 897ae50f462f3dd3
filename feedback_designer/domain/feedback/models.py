"""Value objects exchanged with the feedback solver."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import InvalidInputError

DividerFormula = Callable[[float, float], float]
"""Pure function mapping (R1, R2) in ohms to the regulated output voltage."""


@dataclass(frozen=True, slots=True)
class FeedbackTarget:
    """Output voltage and total divider resistance requested by the user."""

    target_voltage: float
    target_total_resistance: float  # ohms

    def __post_init__(self) -> None:
        """Validate target data."""
        _require_positive_finite("target_voltage", self.target_voltage)
        _require_positive_finite("target_total_resistance", self.target_total_resistance)


@dataclass(frozen=True, slots=True)
class FeedbackSolution:
    """Best resistor pair found for a target, with the voltage it yields."""

    r1: float  # ohms, top of the divider
    r2: float  # ohms, bottom of the divider
    achieved_voltage: float
    score: float

    @property
    def total_resistance(self) -> float:
        return self.r1 + self.r2

    def voltage_error(self, target_voltage: float) -> float:
        return abs(target_voltage - self.achieved_voltage)


def _require_positive_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{name} must be numeric, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
