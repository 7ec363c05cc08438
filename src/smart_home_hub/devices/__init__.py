"""
Devices for smart-home-hub.

Features:
- Light, Thermostat and DoorLock state holders
- DeviceFactory building devices from type tags
- DeviceProxy forwarding wrapper (access-control interposition point)
"""

from .models import Device, DeviceType, DoorLock, Light, Thermostat
from .factory import DeviceFactory
from .proxy import DeviceProxy

__all__ = [
    "Device",
    "DeviceType",
    "Light",
    "Thermostat",
    "DoorLock",
    "DeviceFactory",
    "DeviceProxy",
]
