"""
Data models for scheduling and triggers.

Scheduled tasks and triggers are immutable once created.
"""

from dataclasses import dataclass
from datetime import time
from typing import Dict, Any

# Command vocabulary for scheduled tasks (compared case-insensitively)
COMMAND_TURN_ON = "turn on"
COMMAND_TURN_OFF = "turn off"


@dataclass(frozen=True)
class ScheduledTask:
    """A command bound to a device and a time of day."""

    device_id: int
    time: time  # Hour:minute resolution
    command: str  # As written, e.g. "Turn On"

    def matches(self, at: time) -> bool:
        """Check whether this task is due at the given time (same hour and minute)."""
        return (self.time.hour, self.time.minute) == (at.hour, at.minute)

    def describe(self, time_format: str = "%H:%M") -> str:
        """Render as a report record."""
        return (
            f'{{device: {self.device_id}, time: "{self.time.strftime(time_format)}", '
            f'command: "{self.command}"}}'
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "device_id": self.device_id,
            "time": self.time.isoformat(timespec="minutes"),
            "command": self.command,
        }


@dataclass(frozen=True)
class Trigger:
    """A condition -> action rule evaluated on every tick."""

    condition: str  # e.g. "temperature"
    operator: str  # e.g. ">"
    value: int  # Threshold
    action: str  # e.g. "turnOff(1)"

    def describe(self) -> str:
        """Render as a report record."""
        return (
            f'{{condition: "{self.condition} {self.operator} {self.value}", '
            f'action: "{self.action}"}}'
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "condition": self.condition,
            "operator": self.operator,
            "value": self.value,
            "action": self.action,
        }


@dataclass
class TickResult:
    """Result of one tick of the scheduler and trigger engine."""

    tasks_executed: int = 0
    triggers_fired: int = 0
