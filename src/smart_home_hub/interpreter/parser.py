"""
Parsers for the device-list and command-list literals.

Device list:
    [{id: 1, type: 'light', status: 'off'}, {id: 2, type: 'thermostat', temperature: 70}]

Command list:
    ['turnOn(1)', 'setSchedule(2, "06:00", "Turn On")']

The grammar is fixed and small: bracketed, comma-separated items, where
commas inside quotes or nested brackets do not split.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from smart_home_hub.exceptions import MalformedInput

_QUOTES = ("'", '"')
_CLOSERS = {"(": ")", "[": "]", "{": "}"}
_CALL = re.compile(r"^\s*([A-Za-z_]\w*)\s*\((.*)\)\s*$", re.DOTALL)


@dataclass(frozen=True)
class DeviceRecord:
    """One record of a device-list literal."""

    device_id: int
    device_type: str
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Command:
    """A parsed function-call-like command, e.g. turnOn(1)."""

    name: str
    args: Tuple[str, ...]
    text: str


def split_top_level(text: str, sep: str = ",") -> List[str]:
    """
    Split text on a separator, ignoring separators inside quotes or brackets.

    Args:
        text: Text to split
        sep: Single-character separator

    Returns:
        The pieces, unstripped

    Raises:
        MalformedInput: On unterminated quotes or unbalanced brackets
    """
    parts: List[str] = []
    stack: List[str] = []
    quote = None
    start = 0

    for i, char in enumerate(text):
        if quote:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
        elif char in _CLOSERS.values():
            if not stack or stack.pop() != char:
                raise MalformedInput(f"Unbalanced '{char}'", text)
        elif char == sep and not stack:
            parts.append(text[start:i])
            start = i + 1

    if quote:
        raise MalformedInput("Unterminated quote", text)
    if stack:
        raise MalformedInput(f"Missing '{stack[-1]}'", text)

    parts.append(text[start:])
    return parts


def unquote(value: str) -> str:
    """Strip matching single or double quotes from a stripped value."""
    value = value.strip()
    if value[:1] in _QUOTES:
        if len(value) < 2 or value[-1] != value[0]:
            raise MalformedInput("Unterminated quote", value)
        return value[1:-1]
    return value


def _strip_delimiters(text: str, opener: str, closer: str) -> str:
    text = text.strip()
    if not text.startswith(opener) or not text.endswith(closer):
        raise MalformedInput(f"Expected '{opener}...{closer}'", text)
    return text[1:-1]


def _split_items(text: str) -> List[str]:
    body = _strip_delimiters(text, "[", "]")
    if not body.strip():
        return []

    items = [item.strip() for item in split_top_level(body)]
    if any(not item for item in items):
        raise MalformedInput("Empty list item", text)
    return items


def parse_int(value: str, what: str) -> int:
    """
    Parse an integer field.

    Raises:
        MalformedInput: If the value is not an integer
    """
    try:
        return int(unquote(value))
    except ValueError:
        raise MalformedInput(f"Expected integer {what}", value) from None


def parse_fields(text: str) -> Dict[str, str]:
    """
    Parse "key: value, key: 'value'" pairs.

    Returns:
        Mapping of keys to unquoted values (last duplicate wins)
    """
    fields: Dict[str, str] = {}
    if not text.strip():
        return fields

    for pair in split_top_level(text):
        key, sep, value = pair.partition(":")
        key = key.strip()
        if not sep or not key or not value.strip():
            raise MalformedInput("Expected 'key: value'", pair.strip())
        fields[key] = unquote(value)

    return fields


def parse_device_list(text: str) -> List[DeviceRecord]:
    """
    Parse a device-list literal.

    Args:
        text: e.g. "[{id: 1, type: 'light', status: 'off'}]"

    Returns:
        Device records in list order

    Raises:
        MalformedInput: If delimiters are missing, or a record lacks a
            numeric id or a type
    """
    records = []

    for item in _split_items(text):
        fields = parse_fields(_strip_delimiters(item, "{", "}"))

        if "id" not in fields:
            raise MalformedInput("Device record has no id", item)
        if not fields.get("type"):
            raise MalformedInput("Device record has no type", item)

        device_id = parse_int(fields.pop("id"), "device id")
        device_type = fields.pop("type")
        records.append(DeviceRecord(device_id=device_id, device_type=device_type, fields=fields))

    return records


def parse_command_list(text: str) -> List[str]:
    """
    Parse a command-list literal into command strings.

    Args:
        text: e.g. "['turnOn(1)', 'turnOff(2)']"

    Returns:
        Unquoted command strings in list order
    """
    return [unquote(item) for item in _split_items(text)]


def parse_command(text: str) -> Command:
    """
    Parse a single function-call-like command.

    Arguments are split positionally and unquoted; conversion to ints and
    times is left to the caller.

    Args:
        text: e.g. 'setSchedule(2, "06:00", "Turn On")'

    Raises:
        MalformedInput: If the text is not of the form name(args)
    """
    match = _CALL.match(text)
    if not match:
        raise MalformedInput("Expected 'name(args)'", text)

    name, arg_text = match.groups()
    args: Tuple[str, ...] = ()
    if arg_text.strip():
        pieces = [piece.strip() for piece in split_top_level(arg_text)]
        if any(not piece for piece in pieces):
            raise MalformedInput("Empty argument", text)
        args = tuple(unquote(piece) for piece in pieces)

    return Command(name=name, args=args, text=text.strip())
