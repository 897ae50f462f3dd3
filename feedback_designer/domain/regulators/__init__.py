"""Regulator parameter table and registry."""

from .base import DeviceId, DeviceInfo
from .devices import LMR33630, TLV62578, register_default_devices
from .registry import DeviceRegistry

__all__ = [
	"DeviceId",
	"DeviceInfo",
	"DeviceRegistry",
	"LMR33630",
	"TLV62578",
	"register_default_devices",
]
