"""
Console Kernel: Notification Sinks

Where user-facing success and error messages go. The kernel only talks to
the Notifier interface; hosts plug in a toast layer, a log or a list.
"""

from __future__ import annotations

import logging

from console.kernel.types import Notification

logger = logging.getLogger(__name__)


class Notifier:
    """Abstract sink. Subclasses implement notify()."""

    def notify(self, notification: Notification) -> None:
        raise NotImplementedError

    def success(self, message: str) -> None:
        self.notify(Notification(level="success", message=message))

    def error(self, message: str) -> None:
        self.notify(Notification(level="error", message=message))


class MemoryNotifier(Notifier):
    """Keeps every notification in a list. For testing and headless hosts."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def clear(self) -> None:
        self.notifications.clear()


class LoggingNotifier(Notifier):
    """Writes notifications to a logger: successes at INFO, errors at WARNING."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def notify(self, notification: Notification) -> None:
        if notification.level == "error":
            self._log.warning("%s", notification.message)
        else:
            self._log.info("%s", notification.message)
