from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagingPort
from app.domain.entities.message import OutboundMessage


class MockMessagingPlatform(MessagingPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def send(self, message: OutboundMessage) -> str | None:
        self._logger.info(
            "Mock send",
            extra={
                "from_identity": message.from_identity,
                "to_identity": message.to_identity,
                "text": message.body,
            },
        )
        return None
