"""Notification sinks"""

import logging
from collections import deque
from typing import Protocol

from ..models.notification import Notification, NotificationKind

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    """Anything that can show a transient message to the shopper"""

    def notify(self, kind: NotificationKind, title: str, message: str) -> Notification:
        ...


class NotificationLog:
    """Sink that keeps notifications until the UI collects them"""

    def __init__(self, max_pending: int = 50):
        self._pending: deque[Notification] = deque(maxlen=max_pending)

    def notify(self, kind: NotificationKind, title: str, message: str) -> Notification:
        notification = Notification(kind=kind, title=title, message=message)
        self._pending.append(notification)
        logger.debug(f"Notification [{kind.value}] {title}: {message}")
        return notification

    def pending(self) -> list[Notification]:
        """Notifications not yet collected, oldest first"""
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return and forget all pending notifications"""
        notifications = list(self._pending)
        self._pending.clear()
        return notifications
