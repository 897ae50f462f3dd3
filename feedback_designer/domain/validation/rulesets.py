"""Default validation rules derived from each regulator's operating limits."""

from __future__ import annotations

from typing import Dict, Tuple

from ...shared.dto import FeedbackRequest, ValidationSeverity
from ..regulators.base import DeviceInfo
from ..regulators.registry import DeviceRegistry
from .engine import DeviceRuleSet, ValidationEngine, ValidationRule


def above_reference(request: FeedbackRequest, device: DeviceInfo) -> Tuple[bool, Dict[str, float]]:
    # 1 + R1/R2 > 1, so no divider can regulate below the FB reference
    details = {"target_voltage": request.target_voltage, "feedback_voltage": device.feedback_voltage}
    return request.target_voltage >= device.feedback_voltage, details


def within_output_range(request: FeedbackRequest, device: DeviceInfo) -> Tuple[bool, Dict[str, float]]:
    details = {
        "target_voltage": request.target_voltage,
        "vout_min": device.vout_min,
        "vout_max": device.vout_max,
    }
    return device.vout_min <= request.target_voltage <= device.vout_max, details


def default_rules() -> list[ValidationRule]:
    return [
        ValidationRule(
            code="vout_below_reference",
            message="Target voltage is below the feedback reference voltage",
            severity=ValidationSeverity.ERROR,
            evaluator=above_reference,
        ),
        ValidationRule(
            code="vout_out_of_range",
            message="Target voltage is outside the regulator's output range",
            severity=ValidationSeverity.WARNING,
            evaluator=within_output_range,
        ),
    ]


def register_default_rules(engine: ValidationEngine, registry: DeviceRegistry) -> ValidationEngine:
    """Register the default ruleset for every device in ``registry``."""

    for device in registry.available_devices():
        engine.register_ruleset(DeviceRuleSet(device_id=device.device_id, rules=default_rules()))
    return engine
