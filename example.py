#!/usr/bin/env python3
"""
Quick example demonstrating smart-home-hub basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging
from datetime import datetime

from smart_home_hub import CommandInterpreter, FixedClock, SmartHomeHub

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

DEVICES = (
    "[{id: 1, type: 'light', status: 'off'}, "
    "{id: 2, type: 'thermostat', temperature: 70}, "
    "{id: 3, type: 'door lock', status: 'locked'}]"
)
COMMANDS = (
    "['turnOn(1)', "
    "'setSchedule(2, \"06:00\", \"Turn On\")', "
    "'addTrigger(\"temperature\", \">\", 75, \"turnOff(1)\")']"
)

print("=" * 60)
print("smart-home-hub Example")
print("=" * 60)

# 1. Hub with a simulated clock
clock = FixedClock(datetime(2025, 1, 15, 5, 59))
hub = SmartHomeHub(clock=clock)
interpreter = CommandInterpreter(hub)

# 2. Devices and commands
interpreter.load_devices(DEVICES)
interpreter.run_commands(COMMANDS)

print(f'\nStatus Report: "{hub.status_report()}"')
print(f'Scheduled Tasks: "{hub.scheduled_tasks_report()}"')
print(f'Automated Triggers: "{hub.triggers_report()}"')

# 3. Drive a few ticks
print("\nTicking...")
hub.get_device(2).unwrap().set_temperature(80)
for hour, minute in ((5, 59), (6, 0)):
    clock.set_time(hour, minute)
    result = hub.tick()
    print(f"   {clock.now():%H:%M} -> {result}")

print(f'\nStatus Report: "{hub.status_report()}"')
