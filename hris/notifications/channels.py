"""NotificationChannel protocol — interface for all notification delivery channels."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotificationChannel(Protocol):
    """Protocol that all notification channels must satisfy."""

    @property
    def name(self) -> str:
        """Channel kind plus target (e.g. 'email:hr@example.com')."""
        ...

    def send(self, message: str) -> bool:
        """Deliver a plain text message. Returns True on success."""
        ...
