"""
Core components of smart-home-hub.

This package contains:
- bus: Notification bus implementation
- clock: Tick time sources
- hub: SmartHomeHub device registry and coordinator
"""

from smart_home_hub.core.bus import Notification, NotificationBus
from smart_home_hub.core.clock import Clock, FixedClock, SystemClock
from smart_home_hub.core.hub import SmartHomeHub

__all__ = [
    "Notification",
    "NotificationBus",
    "Clock",
    "FixedClock",
    "SystemClock",
    "SmartHomeHub",
]
