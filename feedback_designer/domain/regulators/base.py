"""Device parameter records for supported step-down regulators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..feedback.models import DividerFormula


class DeviceId(str, Enum):
    """Canonical identifiers for supported regulators."""

    TLV62578 = "TLV62578"
    LMR33630 = "LMR33630"


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Static parameters and design template for one regulator."""

    device_id: DeviceId
    name: str
    formula: DividerFormula
    feedback_voltage: float  # V, reference at the FB pin
    vin_min: float  # V
    vin_max: float  # V
    vout_min: float  # V
    vout_max: float  # V
    current_max: float  # A
    template: str
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate device ranges."""
        if not self.vin_min < self.vin_max:
            raise ValueError(f"{self.name}: vin_min must be below vin_max")
        if not self.vout_min < self.vout_max:
            raise ValueError(f"{self.name}: vout_min must be below vout_max")
        if self.current_max <= 0:
            raise ValueError(f"{self.name}: current_max must be positive")
