"""SMS implementation of the NotificationChannel protocol."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

# Maximum SMS body length (~10 segments). Longer messages risk delivery issues.
MAX_SMS_LENGTH = 1600


class SMSChannel:
    """Sends notifications to a phone number (printed to the console)."""

    def __init__(self, phone_number: str, stream: TextIO | None = None) -> None:
        self.phone_number = phone_number
        self._stream = stream

    @property
    def name(self) -> str:
        return f"sms:{self.phone_number}"

    def send(self, message: str) -> bool:
        """Write ``SMS to <phone>: <message>``, truncating overly long bodies."""
        if len(message) > MAX_SMS_LENGTH:
            message = message[: MAX_SMS_LENGTH - 3] + "..."
        print(f"SMS to {self.phone_number}: {message}", file=self._stream or sys.stdout)
        logger.debug("SMS notification delivered to %s (%d chars)", self.phone_number, len(message))
        return True
