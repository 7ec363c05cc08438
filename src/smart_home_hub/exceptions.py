"""
Exceptions raised by smart-home-hub.

Only the device factory and the command interpreter raise. Hub operations on
missing devices and non-matching rules are silent no-ops.
"""

from typing import Optional


class HubError(Exception):
    """Base class for smart-home-hub errors."""


class UnknownDeviceType(HubError, ValueError):
    """Raised when the factory is asked for a device type it does not know."""

    def __init__(self, device_type: str) -> None:
        self.device_type = device_type
        super().__init__(f"Unknown device type: '{device_type}'")


class MalformedInput(HubError, ValueError):
    """Raised when a device or command literal cannot be parsed."""

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        self.text = text
        if text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message)
