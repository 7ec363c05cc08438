"""
Command interpreter for smart-home-hub.

Parses device-list and command-list literals and applies them to a hub.
"""

from .parser import (
    Command,
    DeviceRecord,
    parse_command,
    parse_command_list,
    parse_device_list,
    split_top_level,
)
from .interpreter import CommandInterpreter

__all__ = [
    "CommandInterpreter",
    "Command",
    "DeviceRecord",
    "parse_command",
    "parse_command_list",
    "parse_device_list",
    "split_top_level",
]
