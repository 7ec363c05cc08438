"""
smart-home-hub: a home-automation hub core.

This library provides the coordination logic of a smart home hub:
- Device registry with access proxies
- Synchronous notification bus
- Time-of-day scheduler and temperature triggers
- Textual mini-language for devices and commands
"""

from smart_home_hub.config import HubConfig
from smart_home_hub.exceptions import HubError, MalformedInput, UnknownDeviceType
from smart_home_hub.core import (
    Clock,
    FixedClock,
    Notification,
    NotificationBus,
    SmartHomeHub,
    SystemClock,
)
from smart_home_hub.devices import (
    Device,
    DeviceFactory,
    DeviceProxy,
    DeviceType,
    DoorLock,
    Light,
    Thermostat,
)
from smart_home_hub.interpreter import CommandInterpreter

__version__ = "0.1.0"

__all__ = [
    "HubConfig",
    "HubError",
    "MalformedInput",
    "UnknownDeviceType",
    "Clock",
    "FixedClock",
    "SystemClock",
    "Notification",
    "NotificationBus",
    "SmartHomeHub",
    "Device",
    "DeviceFactory",
    "DeviceProxy",
    "DeviceType",
    "DoorLock",
    "Light",
    "Thermostat",
    "CommandInterpreter",
]
