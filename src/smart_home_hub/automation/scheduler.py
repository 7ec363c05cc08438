"""
Scheduler - time-triggered device commands.

Tasks fire when the tick's hour and minute equal the task's exactly. A tick
that skips a minute skips that minute's tasks; there is no catch-up. Every
tick within a due minute fires the task again, so hosts should tick once per
minute.
"""

import logging
from datetime import datetime, time
from typing import TYPE_CHECKING, List, Union

from .models import COMMAND_TURN_OFF, COMMAND_TURN_ON, ScheduledTask

if TYPE_CHECKING:
    from smart_home_hub.core.hub import SmartHomeHub

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Holds scheduled tasks and dispatches the due ones on each tick.

    Tasks are kept in insertion order and never removed.
    """

    def __init__(self, hub: "SmartHomeHub") -> None:
        self._hub = hub
        self._tasks: List[ScheduledTask] = []

    @property
    def tasks(self) -> List[ScheduledTask]:
        """Scheduled tasks in insertion order (copy)."""
        return list(self._tasks)

    def set_schedule(self, device_id: int, at: time, command: str) -> ScheduledTask:
        """
        Schedule a command for a device.

        The device does not need to exist yet; missing devices are
        ignored when the task fires.

        Args:
            device_id: Target device
            at: Time of day to fire at (seconds are ignored)
            command: "turn on" or "turn off" (any case)

        Returns:
            The created task
        """
        task = ScheduledTask(
            device_id=device_id,
            time=at.replace(second=0, microsecond=0),
            command=command,
        )
        self._tasks.append(task)
        logger.info(f"Scheduled '{command}' for device {device_id} at {task.time:%H:%M}")
        return task

    def execute(self, now: Union[datetime, time]) -> int:
        """
        Run every task due at the given time.

        Args:
            now: Current tick time

        Returns:
            Number of tasks dispatched
        """
        current = now.time() if isinstance(now, datetime) else now
        executed = 0

        for task in self._tasks:
            if not task.matches(current):
                continue

            command = task.command.strip().lower()
            if command == COMMAND_TURN_ON:
                self._hub.turn_on(task.device_id, source="scheduler")
            elif command == COMMAND_TURN_OFF:
                self._hub.turn_off(task.device_id, source="scheduler")
            else:
                logger.debug(f"Ignoring unknown scheduled command: {task.command}")
                continue
            executed += 1

        return executed
