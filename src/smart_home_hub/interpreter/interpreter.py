"""
CommandInterpreter: applies device and command literals to a hub.

Each literal is parsed and validated in full before anything is applied, so
a malformed literal leaves the hub exactly as it was. Literals applied
earlier stay in effect.
"""

import logging
from datetime import datetime, time
from typing import Callable, Dict, List, Optional

from smart_home_hub.config import HubConfig
from smart_home_hub.core.hub import SmartHomeHub
from smart_home_hub.devices.factory import DeviceFactory
from smart_home_hub.devices.models import Device, DeviceType, Thermostat
from smart_home_hub.devices.proxy import DeviceProxy
from smart_home_hub.exceptions import MalformedInput

from .parser import (
    Command,
    DeviceRecord,
    parse_command,
    parse_command_list,
    parse_device_list,
    parse_int,
)

logger = logging.getLogger(__name__)

# Initial "status" values -> whether to call turn_on (True) or turn_off (False)
_INITIAL_STATUS: Dict[DeviceType, Dict[str, bool]] = {
    DeviceType.LIGHT: {"on": True, "off": False},
    DeviceType.DOOR_LOCK: {"unlocked": True, "locked": False},
}

# Command name -> number of positional arguments
_ARITY = {
    "turnOn": 1,
    "turnOff": 1,
    "setSchedule": 3,
    "addTrigger": 4,
}


class CommandInterpreter:
    """
    Translates the textual mini-language into hub operations.

    Supported commands:
    - turnOn(<id>)
    - turnOff(<id>)
    - setSchedule(<id>, "<HH:mm>", "<Turn On|Turn Off>")
    - addTrigger("<condition>", "<op>", <int>, "<action>")
    """

    def __init__(
        self,
        hub: SmartHomeHub,
        factory: Optional[DeviceFactory] = None,
        config: Optional[HubConfig] = None,
    ) -> None:
        """
        Initialize the interpreter.

        Args:
            hub: Hub that receives devices and commands
            factory: Device factory (defaults to one using the configured
                default temperature)
            config: Interpreter configuration (defaults to the hub's)
        """
        self._hub = hub
        self._config: HubConfig = config or hub.config
        self._factory = factory or DeviceFactory(self._config.default_temperature)

    # =========================================================================
    # Devices
    # =========================================================================

    def load_devices(self, text: str) -> List[Device]:
        """
        Create and register every device in a device-list literal.

        Devices are built through the factory, wrapped in a DeviceProxy and
        set to their initial state before any of them is added to the hub.
        Initial state does not notify observers.

        Args:
            text: Device-list literal

        Returns:
            The added (proxied) devices in list order

        Raises:
            MalformedInput: If the literal or an initial state is malformed
            UnknownDeviceType: If a record names an unsupported type
        """
        records = parse_device_list(text)
        devices = [self._build_device(record) for record in records]

        for device in devices:
            self._hub.add_device(device)

        logger.info(f"Loaded {len(devices)} devices")
        return devices

    def _build_device(self, record: DeviceRecord) -> Device:
        device = DeviceProxy(self._factory.create_device(record.device_type, record.device_id))

        if isinstance(device.unwrap(), Thermostat):
            if "temperature" in record.fields:
                temperature = parse_int(record.fields["temperature"], "temperature")
                device.unwrap().set_temperature(temperature)
            return device

        status = record.fields.get("status")
        if status is None:
            return device

        turn_on = _INITIAL_STATUS[device.device_type].get(status.strip().lower())
        if turn_on is None:
            raise MalformedInput(
                f"Invalid status for {device.device_type.value} {record.device_id}", status
            )
        if turn_on:
            device.turn_on()
        else:
            device.turn_off()
        return device

    # =========================================================================
    # Commands
    # =========================================================================

    def run_commands(self, text: str) -> int:
        """
        Execute every command in a command-list literal, in order.

        Args:
            text: Command-list literal

        Returns:
            Number of commands executed (unknown commands are skipped)

        Raises:
            MalformedInput: If the literal or any command is malformed
        """
        calls = [self._prepare(parse_command(item)) for item in parse_command_list(text)]

        executed = 0
        for call in calls:
            if call is not None:
                call()
                executed += 1
        return executed

    def execute_command(self, text: str) -> bool:
        """
        Execute a single command string.

        Args:
            text: e.g. "turnOn(1)"

        Returns:
            True if executed, False if the command name is unknown

        Raises:
            MalformedInput: If the command is malformed
        """
        call = self._prepare(parse_command(text))
        if call is None:
            return False
        call()
        return True

    def _prepare(self, command: Command) -> Optional[Callable[[], object]]:
        """Validate a command and bind its converted arguments."""
        arity = _ARITY.get(command.name)
        if arity is None:
            logger.warning(f"Skipping unknown command: {command.text}")
            return None

        if len(command.args) != arity:
            raise MalformedInput(
                f"{command.name} takes {arity} arguments, got {len(command.args)}",
                command.text,
            )

        args = command.args
        device_id = parse_int(args[0], "device id") if command.name != "addTrigger" else None

        if command.name == "turnOn":
            return lambda: self._hub.turn_on(device_id)
        if command.name == "turnOff":
            return lambda: self._hub.turn_off(device_id)
        if command.name == "setSchedule":
            at = self._parse_time(args[1])
            return lambda: self._hub.set_schedule(device_id, at, args[2])

        value = parse_int(args[2], "trigger value")
        return lambda: self._hub.add_trigger(args[0], args[1], value, args[3])

    def _parse_time(self, value: str) -> time:
        try:
            return datetime.strptime(value.strip(), self._config.time_format).time()
        except ValueError:
            raise MalformedInput("Invalid time", value) from None
