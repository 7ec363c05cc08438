"""Device factory: builds a device from a type tag and identity."""

import logging
from typing import Callable, Dict

from smart_home_hub.exceptions import UnknownDeviceType

from .models import Device, DeviceType, DoorLock, Light, Thermostat

logger = logging.getLogger(__name__)


class DeviceFactory:
    """
    Creates devices from textual type tags.

    Type tags are matched case-insensitively against DeviceType values
    ("light", "thermostat", "door lock").
    """

    def __init__(self, default_temperature: int = 70) -> None:
        """
        Initialize the factory.

        Args:
            default_temperature: Temperature new thermostats start at
        """
        self.default_temperature = default_temperature
        self._builders: Dict[DeviceType, Callable[[int], Device]] = {
            DeviceType.LIGHT: Light,
            DeviceType.THERMOSTAT: lambda device_id: Thermostat(
                device_id, self.default_temperature
            ),
            DeviceType.DOOR_LOCK: DoorLock,
        }

    @staticmethod
    def resolve_type(type_tag: str) -> DeviceType:
        """
        Map a type tag to a DeviceType.

        Raises:
            UnknownDeviceType: If the tag is not one of the supported types
        """
        try:
            return DeviceType(type_tag.strip().lower())
        except ValueError:
            raise UnknownDeviceType(type_tag) from None

    def create_device(self, type_tag: str, device_id: int) -> Device:
        """
        Create a device in its type's default state.

        Args:
            type_tag: Device type, e.g. "light" or "door lock"
            device_id: Identity of the new device

        Returns:
            The new device

        Raises:
            UnknownDeviceType: If the tag is not one of the supported types
        """
        device_type = self.resolve_type(type_tag)
        device = self._builders[device_type](device_id)
        logger.debug(f"Created {device_type.value} device {device_id}")
        return device
