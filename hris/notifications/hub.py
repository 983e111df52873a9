"""NotificationHub — broadcasts HR announcements to every registered channel."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hris.activity_log import ActivityLog

if TYPE_CHECKING:
    from hris.notifications.channels import NotificationChannel

logger = logging.getLogger(__name__)


class NotificationHub:
    """Ordered list of channels; ``broadcast`` delivers to all of them in turn.

    There is no channel selection: every registered channel receives every
    message synchronously, in registration order.  The same channel object
    may be registered more than once.
    """

    def __init__(self, activity_log: ActivityLog | None = None) -> None:
        self._activity_log = activity_log if activity_log is not None else ActivityLog.get()
        self._channels: list[NotificationChannel] = []

    @property
    def channels(self) -> tuple[NotificationChannel, ...]:
        """Registered channels, in registration order."""
        return tuple(self._channels)

    def add_channel(self, channel: NotificationChannel) -> None:
        """Append *channel* to the broadcast list."""
        self._channels.append(channel)
        self._activity_log.log(f"Notification channel added: {channel.name}")

    def remove_channel(self, channel: NotificationChannel) -> bool:
        """Remove the first registration of *channel* (matched by identity).

        Returns False, without logging, if the channel isn't registered.
        """
        for index, registered in enumerate(self._channels):
            if registered is channel:
                del self._channels[index]
                self._activity_log.log(f"Notification channel removed: {channel.name}")
                return True
        return False

    def broadcast(self, message: str) -> int:
        """Send *message* to every channel. Returns how many reported success."""
        self._activity_log.log(f"Broadcasting notification: {message}")
        delivered = 0
        for channel in list(self._channels):
            try:
                ok = channel.send(message)
            except Exception:
                logger.exception("NotificationHub: channel %s failed", channel.name)
                continue
            if ok:
                delivered += 1
            else:
                logger.warning("NotificationHub: channel %s reported failure", channel.name)
        return delivered
