"""Notification sinks for success and failure notices.

A sink receives short human-readable notices after each store mutation.
Sinks are fire-and-forget: they return nothing and must not raise. The store
calls them through :func:`deliver`, which logs and drops any exception a
misbehaving sink lets escape.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class NotificationSink(ABC):
    """Receiver for mutation outcome notices."""

    @abstractmethod
    def notify_success(self, message: str) -> None:
        """Report a completed operation."""
        pass

    @abstractmethod
    def notify_failure(self, message: str) -> None:
        """Report a failed operation."""
        pass


class NullNotificationSink(NotificationSink):
    """Sink that discards every notice."""

    def notify_success(self, message: str) -> None:
        pass

    def notify_failure(self, message: str) -> None:
        pass


class LoggingNotificationSink(NotificationSink):
    """Sink that writes notices to the ``givingcircle.notifications`` logger."""

    def __init__(self, logger_name: str = "givingcircle.notifications"):
        self.logger = logging.getLogger(logger_name)

    def notify_success(self, message: str) -> None:
        self.logger.info(message)

    def notify_failure(self, message: str) -> None:
        self.logger.warning(message)


def deliver(sink: NotificationSink, message: str, success: bool) -> None:
    """Send a notice to a sink without letting sink errors reach the caller."""
    try:
        if success:
            sink.notify_success(message)
        else:
            sink.notify_failure(message)
    except Exception:
        logger.exception("Notification sink %r failed to deliver %r", sink, message)
