"""Registry resolving device parameter records by identifier."""

from __future__ import annotations

from typing import Dict, Iterable

from ..errors import DeviceNotSupportedError
from .base import DeviceId, DeviceInfo


class DeviceRegistry:
    """Lookup table of regulators the designer knows how to solve for."""

    def __init__(self) -> None:
        self._registry: Dict[DeviceId, DeviceInfo] = {}

    def register(self, info: DeviceInfo, *, override: bool = False) -> None:
        """Register the parameter record for a device."""

        if not override and info.device_id in self._registry:
            raise ValueError(f"Device {info.device_id.value} already registered")

        self._registry[info.device_id] = info

    def resolve(self, device_id: DeviceId | str) -> DeviceInfo:
        """Return the parameter record for ``device_id``."""

        try:
            return self._registry[DeviceId(device_id)]
        except (KeyError, ValueError) as exc:
            raise DeviceNotSupportedError(f"Unsupported device: {device_id}") from exc

    def available_devices(self) -> Iterable[DeviceInfo]:
        """List registered devices in registration order."""

        return self._registry.values()

    def __contains__(self, device_id: object) -> bool:
        try:
            return DeviceId(device_id) in self._registry
        except ValueError:
            return False
