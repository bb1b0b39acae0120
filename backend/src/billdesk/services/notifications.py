"""
User notifications (toasts) raised by the dashboard.

The dashboard only ever sends error notifications and never waits on
them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A single user-facing notification."""
    title: str
    message: str
    variant: str = "destructive"


class Notifier(ABC):
    """Abstract interface for delivering notifications to the user."""
    
    @abstractmethod
    def notify_error(self, title: str, message: str) -> None:
        """Show an error notification. Fire-and-forget."""
        pass


class LoggingNotifier(Notifier):
    """Notifier that writes notifications to the log."""
    
    def notify_error(self, title: str, message: str) -> None:
        logger.error(f"{title}: {message}")


class RecordingNotifier(LoggingNotifier):
    """
    Logs notifications and keeps them for the caller.
    
    Used by the HTTP layer to return notifications alongside the dashboard.
    """
    
    def __init__(self) -> None:
        self.notifications: list[Notification] = []
    
    def notify_error(self, title: str, message: str) -> None:
        super().notify_error(title, message)
        self.notifications.append(Notification(title=title, message=message))
