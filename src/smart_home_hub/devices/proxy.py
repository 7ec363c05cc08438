"""
Access proxy for devices.

The proxy is the interposition point for access checks. It currently
forwards every call unchanged.
"""

from typing import TYPE_CHECKING, Optional

from .models import Device, DeviceType

if TYPE_CHECKING:
    from smart_home_hub.core.bus import Notification


class DeviceProxy(Device):
    """Forwards every capability call to the wrapped device."""

    def __init__(self, device: Device) -> None:
        self._device = device

    @property
    def device(self) -> Device:
        """The wrapped device."""
        return self._device

    @property
    def device_id(self) -> int:
        return self._device.device_id

    @property
    def device_type(self) -> DeviceType:
        return self._device.device_type

    @property
    def last_notification(self) -> Optional["Notification"]:
        return self._device.last_notification

    def turn_on(self) -> None:
        self._device.turn_on()

    def turn_off(self) -> None:
        self._device.turn_off()

    def status(self) -> str:
        return self._device.status()

    def on_notify(self, notification: "Notification") -> None:
        self._device.on_notify(notification)

    def unwrap(self) -> Device:
        return self._device.unwrap()

    def __repr__(self) -> str:
        return f"DeviceProxy({self._device!r})"
