"""
Automation for smart-home-hub.

Features:
- Scheduler: time-of-day commands, exact minute match
- TriggerEngine: temperature threshold rules
"""

from .models import ScheduledTask, Trigger, TickResult
from .scheduler import Scheduler
from .triggers import TriggerEngine, OPERATORS, parse_turn_off_action

__all__ = [
    "ScheduledTask",
    "Trigger",
    "TickResult",
    "Scheduler",
    "TriggerEngine",
    "OPERATORS",
    "parse_turn_off_action",
]
