import pytest

from feedback_designer.domain.errors import DeviceNotSupportedError
from feedback_designer.domain.regulators import (
    LMR33630,
    TLV62578,
    DeviceId,
    DeviceInfo,
    DeviceRegistry,
)
from feedback_designer.domain.regulators.devices import lmr33630_vout, tlv62578_vout


def test_default_devices_registered(registry):
    assert [device.device_id for device in registry.available_devices()] == [
        DeviceId.TLV62578,
        DeviceId.LMR33630,
    ]


def test_resolve_by_string_and_enum(registry):
    assert registry.resolve("TLV62578") is TLV62578
    assert registry.resolve(DeviceId.LMR33630) is LMR33630
    assert "LMR33630" in registry
    assert "LM2596" not in registry


def test_resolve_unknown_device(registry):
    with pytest.raises(DeviceNotSupportedError, match="LM2596"):
        registry.resolve("LM2596")
    with pytest.raises(LookupError):
        registry.resolve("")


def test_duplicate_registration_rejected(registry):
    with pytest.raises(ValueError, match="already registered"):
        registry.register(TLV62578)


def test_override_registration():
    registry = DeviceRegistry()
    registry.register(TLV62578)
    custom = DeviceInfo(
        device_id=DeviceId.TLV62578,
        name="TLV62578 (custom)",
        formula=tlv62578_vout,
        feedback_voltage=0.6,
        vin_min=2.5,
        vin_max=5.5,
        vout_min=0.6,
        vout_max=5.5,
        current_max=1.0,
        template="{{VOUT}}",
    )
    registry.register(custom, override=True)
    assert registry.resolve("TLV62578").name == "TLV62578 (custom)"


def test_device_ranges():
    assert (TLV62578.vin_min, TLV62578.vin_max) == (2.5, 5.5)
    assert (TLV62578.vout_min, TLV62578.vout_max, TLV62578.current_max) == (0.6, 5.5, 1.0)
    assert (LMR33630.vin_min, LMR33630.vin_max) == (3.8, 36.0)
    assert (LMR33630.vout_min, LMR33630.vout_max, LMR33630.current_max) == (1.0, 24.0, 3.0)


def test_divider_formulas():
    assert tlv62578_vout(20000, 20000) == pytest.approx(1.2)
    assert tlv62578_vout(0, 10000) == pytest.approx(0.6)
    assert lmr33630_vout(40000, 10000) == pytest.approx(5.0)
    assert lmr33630_vout(0, 10000) == pytest.approx(1.0)


def test_device_info_rejects_inverted_ranges():
    with pytest.raises(ValueError, match="vout_min"):
        DeviceInfo(
            device_id=DeviceId.LMR33630,
            name="broken",
            formula=lmr33630_vout,
            feedback_voltage=1.0,
            vin_min=3.8,
            vin_max=36.0,
            vout_min=24.0,
            vout_max=1.0,
            current_max=3.0,
            template="",
        )


@pytest.mark.parametrize("device", [TLV62578, LMR33630])
def test_templates_carry_every_placeholder(device):
    for token in ("{{VOUT}}", "{{R1val}}", "{{R2val}}", "{{R1lcsc}}", "{{R2lcsc}}"):
        assert token in device.template
    assert device.template.startswith("(kicad_sch")
