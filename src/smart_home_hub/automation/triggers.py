"""
Trigger engine - condition-based automation rules.

The engine is a minimal interpreter over a closed vocabulary:
- conditions: "temperature" (compared against every thermostat)
- operators: ">"
- actions: "turnOff(<id>)"

Anything outside that vocabulary is ignored.
"""

import logging
from operator import gt
import re
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from smart_home_hub.devices.models import Thermostat

from .models import Trigger

if TYPE_CHECKING:
    from smart_home_hub.core.hub import SmartHomeHub

logger = logging.getLogger(__name__)

CONDITION_TEMPERATURE = "temperature"

OPERATORS: Dict[str, Callable[[int, int], bool]] = {
    ">": gt,
}

_TURN_OFF_ACTION = re.compile(r"^\s*turnOff\(\s*(-?\d+)\s*\)\s*$", re.IGNORECASE)


def parse_turn_off_action(action: str) -> Optional[int]:
    """
    Extract the device ID from a "turnOff(<id>)" action.

    Returns:
        The device ID, or None if the action does not match
    """
    match = _TURN_OFF_ACTION.match(action)
    if not match:
        return None
    return int(match.group(1))


class TriggerEngine:
    """Holds triggers and fires their actions through the hub."""

    def __init__(self, hub: "SmartHomeHub") -> None:
        self._hub = hub
        self._triggers: List[Trigger] = []

    @property
    def triggers(self) -> List[Trigger]:
        """Triggers in insertion order (copy)."""
        return list(self._triggers)

    def add_trigger(self, condition: str, operator: str, value: int, action: str) -> Trigger:
        """
        Add a trigger.

        Args:
            condition: Condition name, e.g. "temperature"
            operator: Comparison operator, e.g. ">"
            value: Threshold
            action: Hub operation to run, e.g. "turnOff(1)"

        Returns:
            The created trigger
        """
        trigger = Trigger(condition=condition, operator=operator, value=value, action=action)
        self._triggers.append(trigger)
        logger.info(f"Added trigger: {condition} {operator} {value} -> {action}")
        return trigger

    def evaluate(self) -> int:
        """
        Evaluate every trigger against current device state.

        A temperature trigger fires its action once per thermostat whose
        temperature satisfies the comparison.

        Returns:
            Number of actions fired
        """
        fired = 0

        for trigger in self._triggers:
            if trigger.condition.strip().lower() != CONDITION_TEMPERATURE:
                continue

            compare = OPERATORS.get(trigger.operator.strip())
            if compare is None:
                logger.debug(f"Unsupported trigger operator: {trigger.operator}")
                continue

            target_id = parse_turn_off_action(trigger.action)
            if target_id is None:
                logger.debug(f"Unsupported trigger action: {trigger.action}")
                continue

            for device in self._hub.all_devices():
                thermostat = device.unwrap()
                if not isinstance(thermostat, Thermostat):
                    continue
                if compare(thermostat.temperature, trigger.value):
                    logger.info(
                        f"Trigger fired: thermostat {thermostat.device_id} at "
                        f"{thermostat.temperature} {trigger.operator} {trigger.value}"
                    )
                    self._hub.turn_off(target_id, source="triggers")
                    fired += 1

        return fired
