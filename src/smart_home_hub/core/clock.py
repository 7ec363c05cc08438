"""
Clock sources for driving scheduled tasks.

The hub never reads the wall clock directly; it asks its Clock. Hosts and
tests can substitute a FixedClock to simulate time.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class Clock(ABC):
    """Abstract time source."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Get the current local time.

        Returns:
            Current datetime
        """
        pass


class SystemClock(Clock):
    """Wall clock in the host's local time zone."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """
    Settable clock for testing and simulations.

    Returns the configured time until it is changed.
    """

    def __init__(self, current: Optional[datetime] = None) -> None:
        self._current = current or datetime(2000, 1, 1)

    def set(self, current: datetime) -> None:
        """Set the time returned by now()."""
        self._current = current

    def set_time(self, hour: int, minute: int) -> None:
        """Move to a time of day, keeping the current date."""
        self._current = self._current.replace(hour=hour, minute=minute, second=0, microsecond=0)

    def now(self) -> datetime:
        return self._current
