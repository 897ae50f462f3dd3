"""Parameter records for the supported step-down regulators."""

from __future__ import annotations

from .base import DeviceId, DeviceInfo
from .registry import DeviceRegistry
from .templates import LMR33630_TEMPLATE, TLV62578_TEMPLATE

TLV62578_FEEDBACK_VOLTAGE = 0.6
LMR33630_FEEDBACK_VOLTAGE = 1.0


def tlv62578_vout(r1: float, r2: float) -> float:
    return TLV62578_FEEDBACK_VOLTAGE * (1 + r1 / r2)


def lmr33630_vout(r1: float, r2: float) -> float:
    return LMR33630_FEEDBACK_VOLTAGE * (1 + r1 / r2)


TLV62578 = DeviceInfo(
    device_id=DeviceId.TLV62578,
    name="TLV62578",
    formula=tlv62578_vout,
    feedback_voltage=TLV62578_FEEDBACK_VOLTAGE,
    vin_min=2.5,
    vin_max=5.5,
    vout_min=0.6,
    vout_max=5.5,
    current_max=1.0,
    template=TLV62578_TEMPLATE,
    description="1 A synchronous step-down converter, 2.5 V to 5.5 V input",
)

LMR33630 = DeviceInfo(
    device_id=DeviceId.LMR33630,
    name="LMR33630",
    formula=lmr33630_vout,
    feedback_voltage=LMR33630_FEEDBACK_VOLTAGE,
    vin_min=3.8,
    vin_max=36.0,
    vout_min=1.0,
    vout_max=24.0,
    current_max=3.0,
    template=LMR33630_TEMPLATE,
    description="3 A synchronous step-down converter, 3.8 V to 36 V input",
)

DEFAULT_DEVICES = (TLV62578, LMR33630)


def register_default_devices(registry: DeviceRegistry) -> DeviceRegistry:
    """Register the built-in regulators with ``registry``."""

    for info in DEFAULT_DEVICES:
        registry.register(info)
    return registry
