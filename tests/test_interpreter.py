"""Tests for the literal parsers and the command interpreter."""

from datetime import time

import pytest

from smart_home_hub import (
    CommandInterpreter,
    HubConfig,
    MalformedInput,
    SmartHomeHub,
    UnknownDeviceType,
)
from smart_home_hub.devices import DeviceProxy, Light
from smart_home_hub.interpreter import (
    parse_command,
    parse_command_list,
    parse_device_list,
    split_top_level,
)


@pytest.fixture
def hub():
    return SmartHomeHub()


@pytest.fixture
def interpreter(hub):
    return CommandInterpreter(hub)


class TestParsers:
    """Tests for the device-list and command-list parsers."""

    def test_split_respects_quotes_and_brackets(self):
        """Test commas inside quotes and parentheses do not split."""
        parts = split_top_level("a, 'b, c', f(1, 2), {x: 1, y: 2}")

        assert [p.strip() for p in parts] == ["a", "'b, c'", "f(1, 2)", "{x: 1, y: 2}"]

    def test_parse_device_list(self):
        """Test records come back in list order with extra fields kept."""
        records = parse_device_list(
            "[{id: 1, type: 'light', status: 'off'}, {id: 2, type: 'thermostat', temperature: 70}]"
        )

        assert [(r.device_id, r.device_type) for r in records] == [(1, "light"), (2, "thermostat")]
        assert records[0].fields == {"status": "off"}
        assert records[1].fields == {"temperature": "70"}

    def test_parse_empty_lists(self):
        """Test empty literals parse to empty lists."""
        assert parse_device_list("[]") == []
        assert parse_command_list(" [ ] ") == []

    @pytest.mark.parametrize(
        "text",
        [
            "{id: 1, type: 'light'}",
            "[{id: 1, type: 'light'",
            "[{id: 1, type: 'light']",
            "[id: 1, type: 'light']",
            "[{id: one, type: 'light'}]",
            "[{type: 'light'}]",
            "[{id: 1}]",
            "[{id: 1, type: 'light}]",
            "[{id: 1, type}]",
            "[{id: 1, type: 'light'},]",
        ],
    )
    def test_malformed_device_list(self, text):
        """Test malformed device literals raise MalformedInput."""
        with pytest.raises(MalformedInput):
            parse_device_list(text)

    def test_parse_command_list(self):
        """Test command items are unquoted."""
        commands = parse_command_list(
            "['turnOn(1)', 'setSchedule(2, \"06:00\", \"Turn On\")']"
        )

        assert commands == ["turnOn(1)", 'setSchedule(2, "06:00", "Turn On")']

    def test_parse_command(self):
        """Test positional arguments are split and unquoted."""
        command = parse_command('addTrigger("temperature", ">", 75, "turnOff(1)")')

        assert command.name == "addTrigger"
        assert command.args == ("temperature", ">", "75", "turnOff(1)")

    @pytest.mark.parametrize("text", ["turnOn", "turnOn(1", "(1)", "turnOn(1,)"])
    def test_malformed_command(self, text):
        """Test malformed commands raise MalformedInput."""
        with pytest.raises(MalformedInput):
            parse_command(text)


class TestLoadDevices:
    """Tests for CommandInterpreter.load_devices."""

    def test_initial_states(self, hub, interpreter):
        """Test initial status and temperature fields are applied."""
        interpreter.load_devices(
            "[{id: 1, type: 'light', status: 'on'}, "
            "{id: 2, type: 'thermostat', temperature: 81}, "
            "{id: 3, type: 'door lock', status: 'unlocked'}]"
        )

        assert hub.status_report() == (
            "Light 1 is On. Thermostat 2 is set to 81 degrees. Door 3 is Unlocked."
        )

    def test_devices_are_proxied(self, hub, interpreter):
        """Test the hub stores proxies around factory-built devices."""
        devices = interpreter.load_devices("[{id: 1, type: 'light'}]")

        assert isinstance(hub.get_device(1), DeviceProxy)
        assert devices == [hub.get_device(1)]
        assert isinstance(hub.get_device(1).unwrap(), Light)

    def test_initial_state_does_not_notify(self, hub, interpreter):
        """Test loading devices does not broadcast notifications."""
        interpreter.load_devices("[{id: 1, type: 'light', status: 'on'}]")

        assert hub.get_device(1).last_notification is None

    def test_unknown_type_adds_nothing(self, hub, interpreter):
        """Test an unknown type aborts the whole literal."""
        with pytest.raises(UnknownDeviceType):
            interpreter.load_devices("[{id: 1, type: 'light'}, {id: 2, type: 'toaster'}]")

        assert hub.all_devices() == []

    def test_malformed_literal_keeps_previous_devices(self, hub, interpreter):
        """Test a malformed literal leaves earlier devices untouched."""
        interpreter.load_devices("[{id: 1, type: 'light', status: 'on'}]")

        with pytest.raises(MalformedInput):
            interpreter.load_devices("[{id: 2, type: 'light', status: 'off'")

        assert hub.status_report() == "Light 1 is On."

    @pytest.mark.parametrize(
        "text",
        [
            "[{id: 1, type: 'light', status: 'dim'}]",
            "[{id: 1, type: 'door lock', status: 'on'}]",
            "[{id: 1, type: 'thermostat', temperature: 'warm'}]",
        ],
    )
    def test_invalid_initial_state(self, hub, interpreter, text):
        """Test invalid initial state values raise MalformedInput and add nothing."""
        with pytest.raises(MalformedInput):
            interpreter.load_devices(text)

        assert hub.all_devices() == []


class TestRunCommands:
    """Tests for CommandInterpreter.run_commands and execute_command."""

    @pytest.fixture(autouse=True)
    def devices(self, interpreter):
        interpreter.load_devices(
            "[{id: 1, type: 'light', status: 'off'}, {id: 3, type: 'door lock', status: 'locked'}]"
        )

    def test_dispatch_all_commands(self, hub, interpreter):
        """Test each command name reaches the right hub operation."""
        executed = interpreter.run_commands(
            "['turnOn(1)', 'turnOn(3)', 'turnOff(3)', "
            "'setSchedule(1, \"22:30\", \"Turn Off\")', "
            "'addTrigger(\"temperature\", \">\", 75, \"turnOff(1)\")']"
        )

        assert executed == 5
        assert hub.status_report() == "Light 1 is On. Door 3 is Locked."
        assert hub.scheduled_tasks[0].time == time(22, 30)
        assert hub.scheduled_tasks[0].command == "Turn Off"
        assert hub.triggers[0].value == 75

    def test_unknown_command_skipped(self, hub, interpreter):
        """Test unknown command names are skipped with a warning."""
        executed = interpreter.run_commands("['dim(1, 50)', 'turnOn(1)']")

        assert executed == 1
        assert hub.status_report() == "Light 1 is On. Door 3 is Locked."

    def test_missing_device_command_is_noop(self, hub, interpreter):
        """Test commands for unknown devices do not raise."""
        interpreter.run_commands("['turnOn(99)']")

        assert hub.status_report() == "Light 1 is Off. Door 3 is Locked."

    @pytest.mark.parametrize(
        "text",
        [
            "['turnOn(1)', 'turnOn(x)']",
            "['turnOn(1)', 'setSchedule(1, \"25:00\", \"Turn On\")']",
            "['turnOn(1)', 'setSchedule(1, \"06:00\")']",
            "['turnOn(1)', 'addTrigger(\"temperature\", \">\", hot, \"turnOff(1)\")']",
            "['turnOn(1)', 'turnOn(1']",
            "'turnOn(1)'",
        ],
    )
    def test_malformed_commands_apply_nothing(self, hub, interpreter, text):
        """Test a malformed command aborts the whole literal before anything runs."""
        with pytest.raises(MalformedInput):
            interpreter.run_commands(text)

        assert hub.status_report() == "Light 1 is Off. Door 3 is Locked."
        assert hub.scheduled_tasks == []

    def test_execute_single_command(self, hub, interpreter):
        """Test executing one command string."""
        assert interpreter.execute_command("turnOn(3)") is True
        assert interpreter.execute_command("reboot()") is False

        assert hub.status_report() == "Light 1 is Off. Door 3 is Unlocked."


class TestInterpreterConfig:
    """Tests for interpreter-level configuration."""

    def test_custom_time_format(self, hub):
        """Test schedule times are parsed with the interpreter's own time format."""
        interpreter = CommandInterpreter(hub, config=HubConfig(time_format="%H.%M"))

        interpreter.run_commands("['setSchedule(1, \"06.45\", \"Turn On\")']")

        assert hub.scheduled_tasks[0].time == time(6, 45)

    def test_custom_time_format_rejects_hub_format(self, hub):
        """Test the hub's default format is not used when a config is given."""
        interpreter = CommandInterpreter(hub, config=HubConfig(time_format="%H.%M"))

        with pytest.raises(MalformedInput):
            interpreter.execute_command('setSchedule(1, "06:45", "Turn On")')

    def test_custom_default_temperature(self, hub):
        """Test the interpreter's config sets the default thermostat temperature."""
        interpreter = CommandInterpreter(hub, config=HubConfig(default_temperature=62))

        interpreter.load_devices("[{id: 2, type: 'thermostat'}]")

        assert hub.status_report() == "Thermostat 2 is set to 62 degrees."
