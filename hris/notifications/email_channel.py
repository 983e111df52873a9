"""E-mail implementation of the NotificationChannel protocol."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class EmailChannel:
    """Sends notifications to an e-mail address (printed to the console)."""

    def __init__(self, address: str, stream: TextIO | None = None) -> None:
        self.address = address
        self._stream = stream

    @property
    def name(self) -> str:
        return f"email:{self.address}"

    def send(self, message: str) -> bool:
        """Write ``EMAIL to <address>: <message>``."""
        print(f"EMAIL to {self.address}: {message}", file=self._stream or sys.stdout)
        logger.debug("Email notification delivered to %s", self.address)
        return True
