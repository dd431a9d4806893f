# src/taskpad/connectors/console_notifier.py

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


@dataclass
class ConsoleNotifier:
    """
    Notifier that shows reminders as a line in the terminal.

    Channels are only remembered by id; posting to an unknown channel is
    logged and the notification is still shown.
    """

    stream: TextIO | None = None
    channels: dict[str, str] = field(default_factory=dict)

    def create_channel(self, *, channel_id: str, name: str, description: str) -> None:
        if channel_id in self.channels:
            return
        self.channels[channel_id] = name
        logger.debug("Notification channel registered id=%s name=%s (%s)", channel_id, name, description)

    async def notify(
        self,
        *,
        notification_id: int,
        channel_id: str,
        title: str,
        body: str,
    ) -> None:
        if channel_id not in self.channels:
            logger.warning("Notification %s posted to unregistered channel %s", notification_id, channel_id)

        out = self.stream if self.stream is not None else sys.stdout
        print(f"\n[{_ts_local()}] [{title}] {body}", file=out, flush=True)
        logger.info("Notification %s shown on channel %s", notification_id, channel_id)
