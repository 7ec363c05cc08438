"""
Device models.

A device is a small state holder exposing a uniform capability set:
turn_on, turn_off, status and on_notify. The device type decides which
commands actually change state.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from smart_home_hub.core.bus import Notification

logger = logging.getLogger(__name__)


class DeviceType(Enum):
    """Closed set of supported device types."""

    LIGHT = "light"
    THERMOSTAT = "thermostat"
    DOOR_LOCK = "door lock"


class Device(ABC):
    """
    Base class for controllable devices.

    Devices are observers of the hub: every added device receives a
    notification whenever hub state changes.
    """

    def __init__(self, device_id: int, device_type: DeviceType) -> None:
        self._device_id = device_id
        self._device_type = device_type
        self.last_notification: Optional["Notification"] = None

    @property
    def device_id(self) -> int:
        """Unique identity of this device (immutable)."""
        return self._device_id

    @property
    def device_type(self) -> DeviceType:
        return self._device_type

    @abstractmethod
    def turn_on(self) -> None:
        """Apply the 'on' command for this device type."""
        pass

    @abstractmethod
    def turn_off(self) -> None:
        """Apply the 'off' command for this device type."""
        pass

    @abstractmethod
    def status(self) -> str:
        """
        Get a human-readable status sentence.

        Returns:
            Status text without trailing period, e.g. "Light 1 is On"
        """
        pass

    def on_notify(self, notification: "Notification") -> None:
        """
        React to a hub-level state change.

        Args:
            notification: The notification broadcast by the hub
        """
        self.last_notification = notification
        logger.debug(f"Device {self.device_id} notified: {notification.type}")

    def unwrap(self) -> "Device":
        """Get the concrete device behind any wrappers."""
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(device_id={self.device_id})"


class Light(Device):
    """A switchable light. Starts off."""

    def __init__(self, device_id: int) -> None:
        super().__init__(device_id, DeviceType.LIGHT)
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False

    def status(self) -> str:
        return f"Light {self.device_id} is {'On' if self.is_on else 'Off'}"


class Thermostat(Device):
    """
    A thermostat holding a target temperature.

    On/off commands are accepted but have no effect.
    """

    def __init__(self, device_id: int, temperature: int) -> None:
        super().__init__(device_id, DeviceType.THERMOSTAT)
        self.temperature = temperature

    def set_temperature(self, temperature: int) -> None:
        self.temperature = temperature

    def turn_on(self) -> None:
        pass

    def turn_off(self) -> None:
        pass

    def status(self) -> str:
        return f"Thermostat {self.device_id} is set to {self.temperature} degrees"


class DoorLock(Device):
    """
    A door lock. Starts locked.

    turn_on unlocks the door, turn_off locks it.
    """

    def __init__(self, device_id: int) -> None:
        super().__init__(device_id, DeviceType.DOOR_LOCK)
        self.is_locked = True

    def turn_on(self) -> None:
        self.is_locked = False

    def turn_off(self) -> None:
        self.is_locked = True

    def status(self) -> str:
        return f"Door {self.device_id} is {'Locked' if self.is_locked else 'Unlocked'}"
