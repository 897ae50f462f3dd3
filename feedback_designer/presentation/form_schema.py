"""Form schema definitions for the feedback design form."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FieldDefinition:
    """Represents a single input field exposed to the user."""

    key: str
    label: str
    unit: str
    default: float
    step: float
    scale: float = 1.0  # multiplier from the displayed unit to SI


TARGET_VOLTAGE = FieldDefinition("target_voltage", "Target Voltage", unit="V", default=1.2, step=0.1)
TARGET_RESISTANCE = FieldDefinition(
    "target_total_resistance",
    "Target Feedback Resistance",
    unit="kΩ",
    default=40,
    step=1,
    scale=1e3,
)
