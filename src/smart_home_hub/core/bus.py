"""
Notification bus for hub state changes.

The bus is a simple, synchronous fan-out to registered observers.
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Optional, Dict, Any, Callable, List
import logging

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    """Get current UTC time (for default factory)."""
    return datetime.now(UTC)


@dataclass
class Notification:
    """
    A hub state change broadcast to every observer.

    Attributes:
        type: Notification type (e.g., "device.turned_on", "device.turned_off")
        source: Notification source (e.g., "hub", "scheduler", "triggers")
        device_id: Optional device ID this notification relates to
        payload: Notification-specific data
        timestamp: When the change happened
    """

    type: str
    source: str
    device_id: Optional[int] = None
    payload: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utc_now)


NotificationHandler = Callable[[Notification], None]


def _handler_name(handler: NotificationHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))


class NotificationBus:
    """
    Synchronous observer registry.

    Handlers are wrapped in try/except so one failing observer cannot stop
    delivery to the rest.
    """

    def __init__(self) -> None:
        """Initialize an empty bus."""
        self._observers: List[NotificationHandler] = []

    @property
    def observer_count(self) -> int:
        """Number of registered observers (duplicates counted)."""
        return len(self._observers)

    def register_observer(self, handler: NotificationHandler) -> None:
        """
        Register an observer.

        Registering the same handler twice means it is called twice.

        Args:
            handler: Callable that receives Notification objects
        """
        self._observers.append(handler)
        logger.debug(f"Registered observer {_handler_name(handler)}")

    def remove_observer(self, handler: NotificationHandler) -> None:
        """
        Remove the first registration of an observer.

        Does nothing if the handler is not registered.

        Args:
            handler: The handler to remove
        """
        try:
            self._observers.remove(handler)
        except ValueError:
            return
        logger.debug(f"Removed observer {_handler_name(handler)}")

    def notify_observers(self, notification: Notification) -> None:
        """
        Deliver a notification to every observer in registration order.

        Args:
            notification: The notification to deliver
        """
        logger.debug(
            f"Notifying {len(self._observers)} observers: "
            f"{notification.type} from {notification.source}"
        )

        # Snapshot so observers may (un)register while being notified
        for handler in list(self._observers):
            try:
                handler(notification)
            except Exception as e:
                logger.error(
                    f"Error in observer {_handler_name(handler)} "
                    f"for notification {notification.type}: {e}",
                    exc_info=True,
                )
