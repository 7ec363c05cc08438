"""
SmartHomeHub: the device registry and coordinator.

The hub owns the devices, the schedule and the triggers. Scheduler and
trigger engine are driven by an external tick and call back into the hub's
mutating operations.
"""

from datetime import datetime, time
from typing import Dict, List, Optional, Union
import logging
import threading

from smart_home_hub.automation.models import ScheduledTask, Trigger, TickResult
from smart_home_hub.automation.scheduler import Scheduler
from smart_home_hub.automation.triggers import TriggerEngine
from smart_home_hub.config import HubConfig
from smart_home_hub.core.bus import Notification, NotificationBus
from smart_home_hub.core.clock import Clock, SystemClock
from smart_home_hub.devices.models import Device

logger = logging.getLogger(__name__)


class SmartHomeHub:
    """
    Registry of devices plus the scheduler and trigger engine.

    Responsibilities:
    - Store devices keyed by identity (registry order preserved)
    - Register every added device as an observer
    - Run device commands and broadcast the change
    - Produce status, schedule and trigger reports

    Operations on a missing device ID do nothing. They never raise.

    All mutating operations hold a single reentrant lock, so the hub can be
    shared by several threads of a host process.
    """

    def __init__(
        self,
        config: Optional[HubConfig] = None,
        clock: Optional[Clock] = None,
        bus: Optional[NotificationBus] = None,
    ) -> None:
        """
        Initialize an empty hub.

        Args:
            config: Hub configuration (defaults to HubConfig())
            clock: Time source for ticks (defaults to the system clock)
            bus: Notification bus (a new one is created if omitted)
        """
        self.config = config or HubConfig()
        self.clock = clock or SystemClock()
        self.bus = bus or NotificationBus()

        self._devices: Dict[int, Device] = {}
        self._lock = threading.RLock()
        self._scheduler = Scheduler(self)
        self._triggers = TriggerEngine(self)

    # =========================================================================
    # Registry
    # =========================================================================

    def add_device(self, device: Device) -> None:
        """
        Add a device and register it as an observer.

        If a device with the same ID exists it is replaced and stops
        receiving notifications.

        Args:
            device: The device (usually a DeviceProxy)
        """
        with self._lock:
            previous = self._devices.get(device.device_id)
            if previous is not None:
                self.bus.remove_observer(previous.on_notify)
                logger.info(f"Replacing device {device.device_id}")

            self._devices[device.device_id] = device
            self.bus.register_observer(device.on_notify)
            logger.info(f"Added device: {device.device_id} ({device.device_type.value})")

    def get_device(self, device_id: int) -> Optional[Device]:
        """
        Get a device by ID.

        Args:
            device_id: The device ID

        Returns:
            The device or None if not found
        """
        with self._lock:
            return self._devices.get(device_id)

    def all_devices(self) -> List[Device]:
        """
        Get all devices.

        Returns:
            List of devices in registry order
        """
        with self._lock:
            return list(self._devices.values())

    # =========================================================================
    # Device Commands
    # =========================================================================

    def turn_on(self, device_id: int, source: str = "hub") -> bool:
        """
        Turn a device on and notify observers.

        Args:
            device_id: The device ID
            source: Who issued the command (carried in the notification)

        Returns:
            True if the device exists, False if the call was a no-op
        """
        return self._apply(device_id, "turned_on", source)

    def turn_off(self, device_id: int, source: str = "hub") -> bool:
        """
        Turn a device off and notify observers.

        Args:
            device_id: The device ID
            source: Who issued the command (carried in the notification)

        Returns:
            True if the device exists, False if the call was a no-op
        """
        return self._apply(device_id, "turned_off", source)

    def _apply(self, device_id: int, change: str, source: str) -> bool:
        with self._lock:
            device = self._devices.get(device_id)
            if device is None:
                logger.debug(f"Ignoring {change} for missing device {device_id}")
                return False

            if change == "turned_on":
                device.turn_on()
            else:
                device.turn_off()

            status = device.status()
            logger.info(f"Device {device_id} {change} by {source}: {status}")
            self.bus.notify_observers(
                Notification(
                    type=f"device.{change}",
                    source=source,
                    device_id=device_id,
                    payload={"status": status},
                )
            )
            return True

    # =========================================================================
    # Scheduling and Triggers
    # =========================================================================

    def set_schedule(self, device_id: int, at: time, command: str) -> ScheduledTask:
        """Schedule "turn on" / "turn off" for a device at a time of day."""
        with self._lock:
            return self._scheduler.set_schedule(device_id, at, command)

    def add_trigger(self, condition: str, operator: str, value: int, action: str) -> Trigger:
        """Add a condition -> action rule, e.g. ("temperature", ">", 75, "turnOff(1)")."""
        with self._lock:
            return self._triggers.add_trigger(condition, operator, value, action)

    @property
    def scheduled_tasks(self) -> List[ScheduledTask]:
        with self._lock:
            return self._scheduler.tasks

    @property
    def triggers(self) -> List[Trigger]:
        with self._lock:
            return self._triggers.triggers

    def execute_scheduled_tasks(self, now: Optional[Union[datetime, time]] = None) -> int:
        """
        Run the tasks due at the given time.

        Args:
            now: Tick time (defaults to the hub's clock)

        Returns:
            Number of tasks dispatched
        """
        if now is None:
            now = self.clock.now()

        with self._lock:
            return self._scheduler.execute(now)

    def evaluate_triggers(self) -> int:
        """
        Evaluate all triggers against current device state.

        Returns:
            Number of trigger actions fired
        """
        with self._lock:
            return self._triggers.evaluate()

    def tick(self, now: Optional[Union[datetime, time]] = None) -> TickResult:
        """
        Run one evaluation cycle: scheduled tasks, then triggers.

        Args:
            now: Tick time (defaults to the hub's clock)

        Returns:
            Counts of tasks executed and triggers fired
        """
        with self._lock:
            result = TickResult(
                tasks_executed=self.execute_scheduled_tasks(now),
                triggers_fired=self.evaluate_triggers(),
            )
        logger.debug(f"Tick complete: {result}")
        return result

    # =========================================================================
    # Reports
    # =========================================================================

    def status_report(self) -> str:
        """
        Get one status sentence per device, in registry order.

        Returns:
            e.g. "Light 1 is On. Thermostat 2 is set to 70 degrees."
        """
        with self._lock:
            return " ".join(f"{device.status()}." for device in self._devices.values())

    def scheduled_tasks_report(self) -> str:
        """
        Render the schedule.

        Returns:
            e.g. '[{device: 2, time: "06:00", command: "Turn On"}]', or "[]"
        """
        with self._lock:
            records = [task.describe(self.config.time_format) for task in self._scheduler.tasks]
        return f"[{', '.join(records)}]"

    def triggers_report(self) -> str:
        """
        Render the triggers.

        Returns:
            e.g. '[{condition: "temperature > 75", action: "turnOff(1)"}]', or "[]"
        """
        with self._lock:
            records = [trigger.describe() for trigger in self._triggers.triggers]
        return f"[{', '.join(records)}]"
