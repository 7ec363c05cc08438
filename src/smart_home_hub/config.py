"""
Hub configuration.

Configuration is a plain dataclass so the host platform can store it however
it likes and hand it back through from_dict().
"""

from dataclasses import dataclass
from typing import Any, Dict

CURRENT_CONFIG_VERSION = 1


@dataclass
class HubConfig:
    """
    Configuration for a SmartHomeHub and its interpreter.

    Attributes:
        version: Configuration schema version
        default_temperature: Temperature a new thermostat starts at
        time_format: strftime/strptime format for schedule times
    """

    version: int = CURRENT_CONFIG_VERSION
    default_temperature: int = 70
    time_format: str = "%H:%M"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "version": self.version,
            "default_temperature": self.default_temperature,
            "time_format": self.time_format,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HubConfig":
        """
        Deserialize from dict.

        Raises:
            ValueError: If the config version is not supported
        """
        version = data.get("version", CURRENT_CONFIG_VERSION)
        if version != CURRENT_CONFIG_VERSION:
            raise ValueError(f"Unsupported config version: {version}")

        return cls(
            version=version,
            default_temperature=int(data.get("default_temperature", 70)),
            time_format=data.get("time_format", "%H:%M"),
        )
