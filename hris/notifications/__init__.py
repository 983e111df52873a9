"""Notification channel abstraction layer."""

from hris.notifications.channels import NotificationChannel
from hris.notifications.email_channel import EmailChannel
from hris.notifications.hub import NotificationHub
from hris.notifications.sms_channel import SMSChannel

__all__ = [
    "EmailChannel",
    "NotificationChannel",
    "NotificationHub",
    "SMSChannel",
]
