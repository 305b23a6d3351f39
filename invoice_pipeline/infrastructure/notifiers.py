"""Notification channels (simulated delivery on the console)"""

import logging
from typing import TextIO

logger = logging.getLogger(__name__)


class EmailNotifier:
    channel = "Email"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def send(self, message: str) -> None:
        print(f"{self.channel} sent: {message}", file=self.stream)
        logger.info("Notification sent", extra={"channel": self.channel})


class SMSNotifier:
    channel = "SMS"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def send(self, message: str) -> None:
        print(f"{self.channel} sent: {message}", file=self.stream)
        logger.info("Notification sent", extra={"channel": self.channel})
